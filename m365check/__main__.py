import sys

from m365check.cli import main

if __name__ == '__main__':
    sys.exit(main())
