"""
Root conftest.py - makes the package importable from a source checkout.

This conftest is loaded by pytest before any test collection begins.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
