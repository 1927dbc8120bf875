"""
Main entry point for the texsync package when executed as a module.

This allows running the package with `python -m texsync`.
"""

from texsync.cli import main

if __name__ == '__main__':
    main()
