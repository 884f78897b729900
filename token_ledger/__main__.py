"""Allow `python -m token_ledger` to run the demo"""

import sys

from .demo import main

sys.exit(main())
