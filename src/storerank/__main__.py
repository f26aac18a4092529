"""Entry point for running storerank as a module.

Usage:
    python -m storerank
"""

from storerank.app import main

if __name__ == "__main__":
    main()
