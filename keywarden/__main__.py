"""
Keywarden Entry Point
======================

Allows running the CLI via: python -m keywarden
"""

from keywarden.cli import main

if __name__ == "__main__":
    main()
