import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from huffpack.errors import InputUnreadable, OutputUnwritable
from huffpack.utils.debug import _dbg

# mkstemp creates 0600 files; new outputs get what a plain open() would produce
_UMASK = os.umask(0)
os.umask(_UMASK)
_DEFAULT_MODE = 0o666 & ~_UMASK


def add_suffix_to_top_level(rel_path: Path, suffix: str) -> Path:
    """
    Add a suffix to the top-level directory name of a relative path.

    Example:
        'logs/2024/app.log'
        + '_encoded'
        -> 'logs_encoded/2024/app.log'
    """
    parts = list(rel_path.parts)
    if not parts:
        return Path()
    parts[0] = parts[0] + suffix
    return Path(*parts)


def suffix_filename(path: Path, suffix: str) -> Path:
    """
    Add a suffix before the file extension.

    Example:
        file1.txt + '_decoded' -> file1_decoded.txt
        README   + '_decoded'  -> README_decoded
    """
    if path.suffix:
        return path.with_name(path.stem + suffix + path.suffix)
    return path.with_name(path.name + suffix)


@contextmanager
def open_input(path: Path) -> Iterator[BinaryIO]:
    """Open `path` for binary reading, raising InputUnreadable on failure."""
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise InputUnreadable(f"Cannot open input file: {path} ({exc.strerror})") from exc
    with stream:
        yield stream


@contextmanager
def atomic_output(path: Path) -> Iterator[BinaryIO]:
    """
    Write to a temporary sibling of `path` and move it into place on success.

    If the body raises, the temporary file is removed and `path` is left
    untouched, so a failed run never leaves a partial or malformed output.
    """
    path = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise OutputUnwritable(f"Cannot create output file: {path} ({exc.strerror})") from exc

    _dbg(f"writing {path} via {tmp_name}")
    try:
        with os.fdopen(fd, "wb") as stream:
            yield stream
        if path.is_file():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, _DEFAULT_MODE)
        os.replace(tmp_name, path)
    except OSError as exc:
        _discard(tmp_name)
        raise OutputUnwritable(f"Cannot write output file: {path} ({exc.strerror})") from exc
    except BaseException:
        _discard(tmp_name)
        raise


def _discard(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass
