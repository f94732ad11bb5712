"""Entry point script: poll the Bitcoin January 14 ladder and print its rungs."""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ladder_scanner.main import main

if __name__ == "__main__":
    print("Bitcoin January 14 ladder scanner (Ctrl+C to stop)")
    print("-" * 50)
    main()
