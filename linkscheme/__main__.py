"""Entry point for ``python -m linkscheme``."""

import sys

from linkscheme.cli import main

if __name__ == "__main__":
    sys.exit(main())
