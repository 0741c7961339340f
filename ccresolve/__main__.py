"""
Entry point for running ccresolve CLI as a module.

Usage: python -m ccresolve [command] [options]
"""

from ccresolve.cli.parser import main

if __name__ == "__main__":
    main()
