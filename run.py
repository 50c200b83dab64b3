#!/usr/bin/env python3
"""
Strongbox Demo Entry Point

Runs the sample account batches and prints the report to stdout.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from strongbox.demo import main


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)
