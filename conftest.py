"""Test configuration for binheap.
Puts the repository root on sys.path so the flat modules import without an editable install.
"""
from __future__ import annotations
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parent
sp = str(ROOT)
if sp not in sys.path:
    sys.path.insert(0, sp)
