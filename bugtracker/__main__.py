"""Allow ``python -m bugtracker``."""

import sys

from bugtracker.main import main

if __name__ == "__main__":
    sys.exit(main())
