# core/observe.py: optional per-chunk event stream
import json, time
from typing import Optional, Dict, Any, List


def now_ts() -> float:
    return time.time()


def chunk_event(index: int, path: str, nbytes: int, offset: int) -> Dict[str, Any]:
    return {
        "event": "chunk",
        "index": index,
        "path": path,
        "bytes": nbytes,
        "offset": offset,
        "ts": now_ts(),
    }


class TraceSink:
    """Writes events as JSON lines to `path`, or appends them to `collector`."""
    def __init__(self, path: Optional[str] = None, collector: Optional[List[Dict[str, Any]]] = None):
        self.path = path
        self.collector = collector
        self.count = 0

    def emit(self, event: Dict[str, Any]):
        self.count += 1
        if self.path:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(event, separators=(",", ":")) + "\n")
        elif self.collector is not None:
            self.collector.append(event)
