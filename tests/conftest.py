# tests/conftest.py
import sys, os
# Add project root to sys.path so both `chunk_split` and `tests.*` are importable
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
