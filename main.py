#!/usr/bin/env python3
"""
Convenience entry point for running shophours directly.

Usage: python main.py [command] [options]
"""

from shophours.cli.app import app

if __name__ == "__main__":
    app()
