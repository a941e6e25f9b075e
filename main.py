#!/usr/bin/env python3
"""
Main entry point for the ircd server

Usage:
    python main.py [--config PATH] [--check-config]
"""

from ircd.main import run

if __name__ == "__main__":
    run()
