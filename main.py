#!/usr/bin/env python3
"""ANSI Demo - An interactive tour of terminal capabilities.

Usage:
    python main.py

Controls:
    Up/Down or k/j: Move the menu selection
    Enter: Run the selected demo
    q: Quit
"""

from ansidemo.__main__ import main


if __name__ == "__main__":
    main()
