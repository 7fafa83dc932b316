"""
Entry point for module execution (``python -m tinyc``).

This module delegates execution to the CLI handler in ``tinyc.cli.__main__``.
"""

import sys
from tinyc.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
