#!/usr/bin/env python3
"""Command History CLI launcher script.

This script runs the command-history console without installing the
console script entry point.
"""

from command_history.cli.app import main

if __name__ == "__main__":
    main()
