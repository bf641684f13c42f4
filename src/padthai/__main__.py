"""
padthai package entry point.

Allows running: python -m padthai [-d] [file]
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
