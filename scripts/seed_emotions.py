#!/usr/bin/env python3
"""Seed the predefined emotions into Firestore without installing the package.

Usage:
    python scripts/seed_emotions.py [--dry-run]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from emotodo.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
