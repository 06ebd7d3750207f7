import os
import sys

# Debug tracing controlled by environment variable HUFFPACK_DEBUG
_DEBUG = os.environ.get("HUFFPACK_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[HUFF] {msg}", file=sys.stderr)
