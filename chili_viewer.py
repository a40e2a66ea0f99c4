#!/usr/bin/env python3
"""Chili - minimal PNG viewer with drag-to-pan and scroll-to-zoom."""
from __future__ import annotations
import sys

from chili.app import main

if __name__ == "__main__":
    sys.exit(main())
