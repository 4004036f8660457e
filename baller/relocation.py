"""
Relocation of pre-existing user entries into the files holder.

The holder is built under a temporary name and renamed into place last, so a
user entry already called `files` is moved like any other entry instead of
clashing with the holder.
"""

import os
from pathlib import Path
from tqdm import tqdm

from .classifier import classify_entries, snapshot_entries
from .config import FILES_DIR
from .errors import FILES_STAGE, IOFailure
from .payload import ReservedNames
from .paths import unused_path
from .utils import print_info


def relocate_user_entries(
    root: Path,
    reserved: ReservedNames,
    verbose: bool = False,
    prefix: str = "Error"
) -> list[str]:
    """
    Move every user entry of root into root/files/.

    Renames only; contents, modes and directory-ness are untouched. Renames
    completed before a failure are not rolled back; the error context names
    the temporary holder they were moved into.

    Args:
        root: Directory being turned into a ball.
        reserved: Reserved name set built from the payload.
        verbose: Print progress.
        prefix: Command label for error messages.

    Returns:
        Names of the relocated entries, in snapshot order.

    Raises:
        IOFailure: Listing, holder creation or any rename failed.
    """
    root = Path(root)
    moved: list[str] = []
    holder = None

    try:
        # Step 1: snapshot before anything is created
        classification = classify_entries(snapshot_entries(root), reserved)

        # Step 2: build the holder under a name nothing can clash with
        holder = unused_path(root)
        holder.mkdir()

        if verbose:
            print_info(f"Relocating {len(classification.user)} entries into {FILES_DIR}/")

        # Step 3: move user entries in
        for name in tqdm(classification.user, unit="entry", disable=not verbose):
            os.rename(root / name, holder / name)
            moved.append(name)

        # Step 4: the canonical name is free now
        os.rename(holder, root / FILES_DIR)

    except OSError as e:
        raise IOFailure(
            FILES_STAGE,
            prefix=prefix,
            moved=moved,
            holder=str(holder) if holder else None,
        ) from e

    return moved
