#!/usr/bin/env python

"""
Main entry point for clinbear when run as a module.
Allows executing with: python -m clinbear
"""

from clinbear.cli import app

if __name__ == "__main__":
    app()
