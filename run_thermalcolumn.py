#!/usr/bin/env python3
"""
Thermal Column: quick launcher.

Usage:
    python run_thermalcolumn.py [options]

Run ``python run_thermalcolumn.py --help`` for full options.
"""

from thermalcolumn.app import main

if __name__ == "__main__":
    main()
