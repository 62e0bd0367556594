#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py show [--reveal-all]
    python main.py play
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
