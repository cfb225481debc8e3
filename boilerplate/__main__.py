# Program: Boilerplate Module Runner
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())

# Created by Dr. Z. Bakhtiyorov
