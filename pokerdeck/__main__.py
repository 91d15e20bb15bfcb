import sys

from pokerdeck.cli.demo import main

if __name__ == "__main__":
    sys.exit(main())
