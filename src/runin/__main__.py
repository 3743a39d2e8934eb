"""Allow ``python -m runin``."""

import sys

from runin.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
