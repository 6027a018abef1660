"""Entry point for ``python -m wildconf``."""

import sys

from wildconf.cli import main

if __name__ == "__main__":
    sys.exit(main())
