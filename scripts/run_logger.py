#!/usr/bin/env python3
"""Entry point: run the periodic logger (and status server unless INCLUDE_HTTP is not "true")."""

import os
import sys

# Project root: always resolve relative to script location, not cwd
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)

from pulse_logger.app.runner import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
