"""Shared test utilities for lsdups tests."""
from pathlib import Path


def write_file(path: Path, size: int) -> Path:
    """Create path, including missing parents, holding size bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b'x' * size)
    return path
