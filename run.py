#!/usr/bin/env python3
"""
WORDFALL Launcher
==================
Run this script to start the game.
"""

import sys

from wordfall.main import main

if __name__ == "__main__":
    sys.exit(main())
