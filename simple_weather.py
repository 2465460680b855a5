"""
Simple Weather - entry point
Delegates to the command line adapter
"""
import sys

from infrastructure.adapters.input.cli_handler import main

__all__ = ['main']


if __name__ == '__main__':
    sys.exit(main())
