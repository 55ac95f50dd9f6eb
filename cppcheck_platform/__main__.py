"""Allow ``python -m cppcheck_platform``."""

import sys

from cppcheck_platform.main import main

if __name__ == "__main__":
    sys.exit(main())
