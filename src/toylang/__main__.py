"""Allow ``python -m toylang``."""

import sys

from toylang.cli import main

if __name__ == "__main__":
    sys.exit(main())
