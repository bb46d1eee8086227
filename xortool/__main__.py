"""Entry point for running xortool as a module."""

import sys

from xortool.cli import main

if __name__ == "__main__":
    sys.exit(main())
