# naming.py: chunk file name marker and helpers
from typing import Optional

SPLIT_SUFFIX = "split"


def chunk_filename(basename: str, index: int) -> str:
    """Name of chunk `index` for a source called `basename`."""
    if index < 0:
        raise ValueError(f"chunk index must be >= 0, got {index}")
    return f"{basename}.{SPLIT_SUFFIX}{index}"


def chunk_index(filename: str, basename: str) -> Optional[int]:
    """Inverse of chunk_filename. Returns None if `filename` is not a chunk of `basename`."""
    prefix = f"{basename}.{SPLIT_SUFFIX}"
    if not filename.startswith(prefix):
        return None
    digits = filename[len(prefix):]
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    # indices are never padded
    if len(digits) > 1 and digits[0] == "0":
        return None
    return int(digits)
