"""File helpers. Every write goes through a sibling temp file."""

import json
import os
import tempfile
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any


@contextmanager
def atomic_path(path: Path) -> Iterator[Path]:
    """
    Yield a temporary path that replaces `path` when the block succeeds.

    The temporary file lives next to `path` so the final rename never
    crosses filesystems. On error it is removed and `path` is untouched.

    Args:
        path: Destination path; parent directories are created
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    os.close(fd)
    tmp_path = Path(name)
    try:
        yield tmp_path
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON with glyphs left unescaped and a trailing newline."""
    with atomic_path(path) as tmp_path:
        tmp_path.write_text(
            json.dumps(data, ensure_ascii=False, indent=indent) + "\n", encoding="utf-8"
        )


def read_json(path: Path) -> Any:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def read_text_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """
    Iterate over the lines of a text file.

    Args:
        path: Text file
        encoding: Text encoding

    Yields:
        Lines with their line terminator removed
    """
    with Path(path).open("r", encoding=encoding, newline="") as f:
        for line in f:
            yield line.rstrip("\r\n")


def write_text_lines(path: Path, lines: Iterable[str], encoding: str = "utf-8") -> int:
    """
    Write one line per item, each terminated by a newline.

    Returns:
        Number of lines written
    """
    count = 0
    with atomic_path(path) as tmp_path, tmp_path.open("w", encoding=encoding) as f:
        for line in lines:
            f.write(f"{line}\n")
            count += 1
    return count
