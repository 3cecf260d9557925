import sys

from cttt_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
