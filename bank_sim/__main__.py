"""Entry point for ``python -m bank_sim``"""

import sys

from bank_sim.cli import main

if __name__ == "__main__":
    sys.exit(main())
