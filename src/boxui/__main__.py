"""
CLI entry point for the boxui package.

This allows running the package with: python -m boxui
"""

from .cli import main

if __name__ == "__main__":
    main()
