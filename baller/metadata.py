"""
Sentinel marker handling.

A directory is a ball if and only if <root>/.baller exists.
"""

from pathlib import Path

from .config import META_DIR, VERSION_FILE
from .errors import METADATA_STAGE, AlreadyExists, IOFailure


def marker_path(root: Path) -> Path:
    return Path(root) / META_DIR


def is_ball(root: Path) -> bool:
    return marker_path(root).exists()


def write_marker(root: Path, version: str, prefix: str = "Error") -> None:
    """
    Turn root into a ball by creating .baller/version.

    The existence check is not atomic with the creation; a single invocation
    per directory is assumed.

    Args:
        root: Ball root.
        version: Version string written verbatim, no trailing newline.
        prefix: Command label for error messages.

    Raises:
        AlreadyExists: root already has a marker (nothing is touched).
        IOFailure: Marker creation failed.
    """
    meta = marker_path(root)
    if meta.exists():
        raise AlreadyExists("directory is already a ball", prefix=prefix)

    try:
        meta.mkdir()
        (meta / VERSION_FILE).write_bytes(version.encode("utf-8"))
    except OSError as e:
        raise IOFailure(METADATA_STAGE, prefix=prefix) from e


def read_version(root: Path) -> str | None:
    """Return the version that scaffolded root, or None if it is not a ball."""
    version_file = marker_path(root) / VERSION_FILE
    try:
        return version_file.read_bytes().decode("utf-8")
    except FileNotFoundError:
        return None
