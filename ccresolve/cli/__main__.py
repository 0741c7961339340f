"""
Entry point for running ccresolve CLI as a module.

Usage: python -m ccresolve.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
