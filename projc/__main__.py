"""Allow ``python -m projc``."""

import sys

from projc.cli import main

if __name__ == "__main__":
    sys.exit(main())
