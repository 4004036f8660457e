"""
Collision-free temporary paths.
"""

import os
import uuid
from pathlib import Path

TEMP_PREFIX = ".baller-tmp-"


def unused_path(parent: Path, prefix: str = TEMP_PREFIX) -> Path:
    """
    Return a path inside parent that does not exist right now.

    Nothing is created. The loop almost always ends on the first candidate.

    Args:
        parent: Directory the path will live in.
        prefix: Name prefix for the random candidate.

    Returns:
        A non-existent path (dangling symlinks count as existing).
    """
    while True:
        candidate = Path(parent) / f"{prefix}{uuid.uuid4().hex}"
        if not os.path.lexists(candidate):
            return candidate
