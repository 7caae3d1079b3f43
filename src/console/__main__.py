"""Entry point: python -m src.console"""

import sys

from src.console.main import main

if __name__ == "__main__":
    sys.exit(main())
