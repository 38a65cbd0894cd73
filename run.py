#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Examples:
    python run.py play --opponent computer --difficulty hard
    python run.py play --opponent human --size 7x8 --time-limit 20
    python run.py scores --reset
    python run.py benchmark --difficulty hard --iterations 3
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect4.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
