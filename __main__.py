#!/usr/bin/env python3
"""
Forzeit Insights API - Main entry point.
"""

from forzeit_api.server import main

if __name__ == "__main__":
    main()
