"""
Teardown of a ball back into a plain directory.

Mirror image of relocation: the files holder is renamed to a temporary name
before its entries are moved out, so an entry called `files` inside the holder
can be restored under its own name.
"""

import os
import shutil
from pathlib import Path
from tqdm import tqdm

from .config import FILES_DIR
from .errors import DESTROY_STAGE, IOFailure, NotManaged
from .metadata import is_ball
from .payload import ReservedNames
from .paths import unused_path
from .utils import print_info, print_warning


def remove_entry(path: Path) -> None:
    """Delete a file, symlink or directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def teardown_ball(
    root: Path,
    reserved: ReservedNames,
    verbose: bool = False,
    prefix: str = "Error"
) -> list[str]:
    """
    Remove all scaffolding from a ball and restore the files holder's entries.

    Partial teardown is left on disk if a step fails.

    Args:
        root: Ball root.
        reserved: Reserved name set built from the payload.
        verbose: Print progress.
        prefix: Command label for error messages.

    Returns:
        Names restored to root, sorted.

    Raises:
        NotManaged: root has no marker (nothing is touched).
        IOFailure: A restored entry would overwrite something already at root
            (checked before anything is touched), or a deletion or rename
            failed. The context names the temporary holder, if one exists.
    """
    root = Path(root)
    if not is_ball(root):
        raise NotManaged("not a ball", prefix=prefix)

    holder = root / FILES_DIR
    restored: list[str] = []
    temp = None
    try:
        # Step 0: refuse up front if a restored entry would land on something
        # already at the top level; scaffold names are about to be freed
        if holder.is_dir():
            clashes = [
                name for name in sorted(os.listdir(holder))
                if name != FILES_DIR
                and name not in reserved.scaffold
                and os.path.lexists(root / name)
            ]
            if clashes:
                raise IOFailure(DESTROY_STAGE, prefix=prefix, clashes=clashes)

        # Step 1: drop every scaffold entry (marker, scripts, hooks, README)
        for name in sorted(reserved.scaffold):
            path = root / name
            if os.path.lexists(path):
                remove_entry(path)

        if not holder.is_dir():
            print_warning(f"No {FILES_DIR}/ directory in {root}, nothing to restore")
            return restored

        # Step 2: get the holder out of the way of its own entries
        temp = unused_path(root)
        os.rename(holder, temp)

        names = sorted(os.listdir(temp))
        if verbose:
            print_info(f"Restoring {len(names)} entries from {FILES_DIR}/")

        # Step 3: move entries back, never over something already present
        for name in tqdm(names, unit="entry", disable=not verbose):
            target = root / name
            if os.path.lexists(target):
                raise FileExistsError(f"Refusing to overwrite {target}")
            os.rename(temp / name, target)
            restored.append(name)

        # Step 4
        temp.rmdir()

    except OSError as e:
        raise IOFailure(
            DESTROY_STAGE,
            prefix=prefix,
            restored=restored,
            temp=str(temp) if temp else None,
        ) from e

    return restored
