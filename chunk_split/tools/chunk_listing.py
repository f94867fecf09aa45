# tools/chunk_listing.py: find chunk files already on disk
import os
from typing import List

from ..core.naming import chunk_index


def list_chunks(directory: str, source_name: str) -> List[str]:
    """Chunk files of `source_name` inside `directory`, ordered by index."""
    basename = os.path.basename(os.fsdecode(source_name))
    directory = os.fsdecode(directory) if directory else ""
    found = []
    with os.scandir(directory or ".") as entries:
        for entry in entries:
            idx = chunk_index(entry.name, basename)
            if idx is None or not entry.is_file():
                continue
            path = os.path.join(directory, entry.name) if directory else entry.name
            found.append((idx, path))
    found.sort()
    return [p for _, p in found]


def missing_indices(paths: List[str], source_name: str) -> List[int]:
    basename = os.path.basename(os.fsdecode(source_name))
    seen = set()
    for p in paths:
        idx = chunk_index(os.path.basename(p), basename)
        if idx is not None:
            seen.add(idx)
    if not seen:
        return []
    return [i for i in range(max(seen) + 1) if i not in seen]
