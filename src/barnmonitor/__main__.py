"""
Run with: python -m barnmonitor
"""
import sys

from barnmonitor.main import main

if __name__ == "__main__":
    sys.exit(main())
