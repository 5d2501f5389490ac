"""Entry point: python -m flugen

Scans lib/**/*.dart (or --path) and writes a .flu.dart beside every unit
holding // @flu declarations.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
