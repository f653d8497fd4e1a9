#!/usr/bin/env python3
"""
Main entry point for Translation Drill.
This file serves as the entry point when running the application from a checkout.
"""

from translation_drill.app import main

if __name__ == "__main__":
    main()
