"""Entry point for ``python -m glswitch``."""

import sys

from glswitch.cli import main

if __name__ == "__main__":
    sys.exit(main())
