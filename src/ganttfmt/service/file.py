# SPDX-License-Identifier: MIT

import os
import shutil
import tempfile
from pathlib import Path

NEW_FILE_MODE = 0o644


def read_text(path: Path) -> str:
    """Read a UTF-8 file keeping its line endings as they are on disk."""
    return path.read_bytes().decode("utf-8")


def write_text_atomic(path: Path, text: str) -> None:
    """
    Write text to path through a temporary file in the same directory.

    The destination is replaced in one step, so it is never left half-written.
    An existing destination keeps its permission bits.
    """
    directory = path.resolve().parent
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        newline="\n",
        dir=directory,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as tf:
        tf.write(text)
        tf.flush()
        temp_path = Path(tf.name)
    try:
        if path.exists():
            shutil.copymode(path, temp_path)
        else:
            temp_path.chmod(NEW_FILE_MODE)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
