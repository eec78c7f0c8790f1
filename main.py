#!/usr/bin/env python3
"""
promptengine demo

Thin wrapper around the demonstration program, which asks one question per
prompt primitive and prints a summary of the answers.

To run: python main.py
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from promptengine.cli import run

if __name__ == "__main__":
    run()
