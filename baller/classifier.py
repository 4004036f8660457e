"""
Classification of a directory's top-level entries.

Splits a directory snapshot into entries the scaffolding owns and entries that
belong to the user. Classification works on a snapshot list, never on a live
directory, so relocation never observes its own output.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .payload import ReservedNames


@dataclass(frozen=True)
class Classification:
    managed: tuple[str, ...]
    user: tuple[str, ...]


def snapshot_entries(root: Path) -> list[str]:
    """
    Return the sorted top-level entry names of a directory.

    Args:
        root: Directory to list.

    Returns:
        Entry names, sorted for a stable order.
    """
    return sorted(os.listdir(root))


def classify_entries(entries: list[str], reserved: ReservedNames) -> Classification:
    """
    Partition a snapshot into managed and user entries.

    An entry named like the files holder is ordinary user content; relocation
    builds the holder under a temporary name so it never clashes.

    Args:
        entries: Snapshot from snapshot_entries().
        reserved: Reserved name set built from the payload.

    Returns:
        Classification with both partitions in snapshot order.
    """
    managed = []
    user = []
    for name in entries:
        if name in reserved:
            managed.append(name)
        else:
            user.append(name)
    return Classification(managed=tuple(managed), user=tuple(user))
