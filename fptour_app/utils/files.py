"""
Scoped text file access.

Thin wrappers that open, read or write, and close a file in one call. Errors
are left to propagate as OSError/UnicodeError so callers decide how to classify
them.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def read_all_text(path: PathLike, encoding: str = "utf-8") -> str:
    """
    Read the full contents of a text file.

    Args:
        path: File to read
        encoding: Text encoding used to decode the bytes

    Returns:
        File contents as a string
    """
    with open(path, encoding=encoding) as f:
        return f.read()


def write_all_text(path: PathLike, text: str, encoding: str = "utf-8",
                   create_dirs: bool = True) -> Path:
    """
    Write text to a file, replacing any existing contents.

    Args:
        path: Destination file
        text: Contents to write
        encoding: Text encoding used to encode the string
        create_dirs: Create missing parent directories first

    Returns:
        The destination as a Path
    """
    output_path = Path(path)

    if create_dirs:
        output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding=encoding) as f:
        f.write(text)

    return output_path
