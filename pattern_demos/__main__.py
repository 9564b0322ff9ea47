"""Allow running the CLI with ``python -m pattern_demos``."""

import sys

from pattern_demos.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
