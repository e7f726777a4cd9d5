"""Entry point for running as module: python -m sclogparser"""

import sys

from sclogparser.cli.commands import main

if __name__ == "__main__":
    sys.exit(main())
