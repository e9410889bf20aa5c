#!/usr/bin/env python3
"""
ABOUTME: Entry point for the typed-env CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from typed_env.cli import main

if __name__ == "__main__":
    main()
