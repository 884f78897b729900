#!/usr/bin/env python3
"""
Token Ledger Entry Point

Runs the demo scenario against a ledger built from TOKEN_LEDGER_* settings.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from token_ledger.demo import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
