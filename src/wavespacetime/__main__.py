"""
Run with: python -m wavespacetime
"""
import sys

from wavespacetime.main import main

if __name__ == "__main__":
    sys.exit(main())
