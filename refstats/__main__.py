"""
Entry point for `python -m refstats`.
"""

from .cli import main

if __name__ == '__main__':
    main()
