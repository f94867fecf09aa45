# chunk_split/tools/trace_analyse.py
import json
import sys
from collections import Counter


def analyze(path: str) -> dict:
    sizes = Counter()
    total = 0
    chunks = 0

    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            ev = json.loads(line)
            if ev.get("event") != "chunk":
                continue
            n = int(ev.get("bytes", 0))
            sizes[n] += 1
            total += n
            chunks += 1

    return {
        "chunks": chunks,
        "total_bytes": total,
        "min_bytes": min(sizes) if sizes else 0,
        "max_bytes": max(sizes) if sizes else 0,
        "by_size": dict(sizes),
    }


def format_summary(summary: dict) -> str:
    lines = [
        f"Chunks: {summary['chunks']}",
        f"Total bytes: {summary['total_bytes']}",
        f"Smallest/largest chunk: {summary['min_bytes']}/{summary['max_bytes']}",
        "By size: " + ", ".join(f"{size}x{count}" for size, count in sorted(summary["by_size"].items())),
    ]
    return "\n".join(lines)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m chunk_split.tools.trace_analyse <trace.jsonl>")
        sys.exit(2)
    print(format_summary(analyze(sys.argv[1])))
