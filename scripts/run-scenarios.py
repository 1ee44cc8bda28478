#!/usr/bin/env python3
"""
Run the exclusive-lock and stress scenarios against one or more backends
and generate a pass-rate report.

    scripts/run-scenarios.py -b memory -b smb -n 20
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.common.runner import main

if __name__ == "__main__":
    main()
