# splitter.py: split a regular file into fixed-size chunk files
import errno
import os
import stat
from typing import Callable, List, Optional

from .naming import chunk_filename
from .observe import TraceSink, chunk_event

DIR_MODE = 0o755


class InvalidChunkSizeError(ValueError):
    pass


class NotRegularFileError(OSError):
    def __init__(self, path: str):
        super().__init__(errno.EINVAL, "not a regular file", path)


def _check_chunk_size(chunk_size) -> int:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise InvalidChunkSizeError(f"chunk size must be an integer, got {chunk_size!r}")
    if chunk_size <= 0:
        raise InvalidChunkSizeError(f"chunk size must be greater than 0, got {chunk_size}")
    return chunk_size


def split_file(
    source_path: str,
    chunk_size: int,
    out_dir: Optional[str] = "",
    *,
    overwrite: bool = True,
    on_chunk: Optional[Callable[[int, str, int], None]] = None,
    trace: Optional[TraceSink] = None,
) -> List[str]:
    """Split `source_path` into chunks of at most `chunk_size` bytes.

    Chunk `i` is written to ``<out_dir>/<basename>.<SPLIT_SUFFIX><i>``. An
    empty `out_dir` means the current working directory; otherwise it is
    created (with parents) if missing. Returns the chunk paths in index order.

    Errors are raised, never logged. Chunks written before a failure are
    left on disk. With ``overwrite=False`` an existing chunk name raises
    FileExistsError instead of being truncated.
    """
    _check_chunk_size(chunk_size)
    source_path = os.fsdecode(source_path)

    # explicit type check; also keeps FIFOs from blocking in open()
    st = os.stat(source_path)
    if not stat.S_ISREG(st.st_mode):
        raise NotRegularFileError(source_path)

    out_paths: List[str] = []
    with open(source_path, "rb") as src:
        out_dir = os.fsdecode(out_dir) if out_dir else ""
        if out_dir:
            os.makedirs(out_dir, mode=DIR_MODE, exist_ok=True)

        basename = os.path.basename(source_path)
        mode = "wb" if overwrite else "xb"
        buf = bytearray(chunk_size)
        view = memoryview(buf)
        offset = 0
        index = 0
        while True:
            n = src.readinto(buf)
            if not n:
                break  # EOF

            name = chunk_filename(basename, index)
            out_path = os.path.join(out_dir, name) if out_dir else name
            with open(out_path, mode) as out:
                out.write(view[:n])
            out_paths.append(out_path)

            if on_chunk is not None:
                on_chunk(index, out_path, n)
            if trace is not None:
                trace.emit(chunk_event(index, out_path, n, offset))
            offset += n
            index += 1

    return out_paths
