"""Filesystem and number formatting helpers."""

from __future__ import annotations

import math
import os
import shutil
from decimal import Decimal
from pathlib import Path


def exist(path: str | os.PathLike) -> bool:
    """Return whether a file or directory exists at ``path``."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def copy_dir(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy the directory ``src`` recursively to ``dst``."""
    src_path, dst_path = Path(src), Path(dst)
    mode = src_path.stat().st_mode & 0o7777
    dst_path.mkdir(mode=mode, parents=True, exist_ok=True)
    for child in src_path.iterdir():
        target = dst_path / child.name
        if child.is_dir():
            copy_dir(child, target)
        else:
            copy_file(child, target)


def copy_file(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy the contents of ``src`` to ``dst`` and give it the same mode."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        shutil.copyfileobj(source, target)
    os.chmod(dst, os.stat(src).st_mode & 0o7777)


def float_to_str(val: float) -> str:
    """Format a float in plain decimal notation with the fewest digits."""
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "+Inf" if val > 0 else "-Inf"
    text = format(Decimal(repr(val)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def str_to_float(val: str) -> float:
    """Parse a float, rejecting surrounding whitespace and digit separators."""
    if val != val.strip() or "_" in val or not val:
        raise ValueError(f"invalid float: {val!r}")
    body = val.lstrip("+-")
    if body[:2].lower() == "0x":
        return float.fromhex(val)
    return float(val)