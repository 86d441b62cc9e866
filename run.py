#!/usr/bin/env python3
"""
Bank Simulator Entry Point

Runs the ledger demonstration: account setup, deposits and withdrawals,
monthly processing and the final account report.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from bank_sim.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
