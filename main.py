#!/usr/bin/env python3
"""
Console Minesweeper - Main entry point.

Usage:
    python main.py [--mines N] [--rows N] [--cols N] [--seed N] [--verbose]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
