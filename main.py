#!/usr/bin/env python3
"""
Slave Zone Manager - Main Entry Point

This is the main entry point for the Slave Zone Manager.
It can be run directly or imported as a module.
"""

from slave_zone_manager.cli.main import main

if __name__ == "__main__":
    main()
