#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four console game

Examples:
    python run.py play
    python run.py play --opponent computer --difficulty 3
    python run.py analyze --moves 4453
    python run.py match --first-difficulty 3 --second-difficulty 1 --games 20
    python run.py --debug-level debug benchmark --iterations 100
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
