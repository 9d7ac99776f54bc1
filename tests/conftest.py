# tests/conftest.py
# Puts src/ on sys.path so the flat modules import without installing.
import sys
import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
