import sys

from logicsim.host import main

if __name__ == "__main__":
    sys.exit(main())
