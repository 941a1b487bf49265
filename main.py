#!/usr/bin/env python3
"""
Screenplay Timeline - Main Entry Point
"""

from screenplay_timeline.cli import main

if __name__ == "__main__":
    main()
