#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Usage:
    python run.py play [--height 6] [--width 7] [--p1-name NAME --p1-color COLOR ...]
    python run.py show [--height 6] [--width 7]
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
