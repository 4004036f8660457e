"""
Ball commands: create, init, destroy (and the update/deploy stubs).

Each command returns a success message or raises a single BallerError whose
message names the command and the stage that failed.
"""

from pathlib import Path

from . import __version__
from .config import Settings, load_settings
from .errors import (
    CREATE_PREFIX,
    DESTROY_PREFIX,
    INIT_PREFIX,
    AlreadyExists,
    InvalidArgument,
    IOFailure,
    NotImplementedCommand,
)
from .metadata import is_ball, write_marker
from .payload import Payload, ReservedNames, build_reserved_names
from .relocation import relocate_user_entries
from .scaffold import install_scripts, write_readme
from .teardown import teardown_ball
from .utils import print_info


def _resolve(
    payload: Payload | None,
    reserved: ReservedNames | None,
    settings: Settings | None
) -> tuple[Payload, ReservedNames, Settings]:
    """Fill in whatever the caller did not build up front."""
    if settings is None:
        settings = load_settings()
    if payload is None:
        payload = Payload(settings.payload_dir)
    if reserved is None:
        reserved = build_reserved_names(payload)
    return payload, reserved, settings


def _make_ball(
    root: Path,
    name: str,
    payload: Payload,
    reserved: ReservedNames,
    settings: Settings,
    prefix: str
) -> None:
    """Relocate, stamp, render and install, in that order."""
    if is_ball(root):
        raise AlreadyExists("directory is already a ball", prefix=prefix)

    moved = relocate_user_entries(root, reserved, verbose=settings.verbose, prefix=prefix)
    write_marker(root, __version__, prefix=prefix)
    write_readme(payload, root, name, settings.username, prefix=prefix)
    copied = install_scripts(payload, root, prefix=prefix)

    if settings.verbose:
        print_info(f"{len(moved)} entries relocated, {len(copied)} scripts installed")


def create(
    name: str | None,
    cwd: Path | None = None,
    payload: Payload | None = None,
    reserved: ReservedNames | None = None,
    settings: Settings | None = None
) -> str:
    """
    Create a new, empty ball in a new directory.

    Args:
        name: Directory (and ball) name, relative to cwd.
        cwd: Base directory; defaults to the process working directory.
        payload: Scaffold payload; built from settings when omitted.
        reserved: Reserved name set; built from payload when omitted.
        settings: Settings; loaded from the environment when omitted.

    Returns:
        Success message.

    Raises:
        InvalidArgument: No name given.
        AlreadyExists: The directory already exists.
        IOFailure: Any later stage failed.
    """
    if not name:
        raise InvalidArgument("no name given", prefix=CREATE_PREFIX)

    payload, reserved, settings = _resolve(payload, reserved, settings)
    root = Path(cwd or Path.cwd()) / name

    try:
        root.mkdir()
    except FileExistsError as e:
        raise AlreadyExists(f'Directory "{name}" already exists', prefix=CREATE_PREFIX) from e
    except OSError as e:
        raise IOFailure(f'Directory "{name}" could not be created', prefix=CREATE_PREFIX) from e

    _make_ball(root, Path(name).name, payload, reserved, settings, CREATE_PREFIX)
    return f'Created "{name}" ball'


def init(
    cwd: Path | None = None,
    payload: Payload | None = None,
    reserved: ReservedNames | None = None,
    settings: Settings | None = None
) -> str:
    """
    Initialize the working directory and its files as a ball.

    The ball is named after the directory's base name.
    """
    payload, reserved, settings = _resolve(payload, reserved, settings)
    root = Path(cwd or Path.cwd()).resolve()
    name = root.name

    _make_ball(root, name, payload, reserved, settings, INIT_PREFIX)
    return f'Initialized "{name}" ball'


def destroy(
    cwd: Path | None = None,
    payload: Payload | None = None,
    reserved: ReservedNames | None = None,
    settings: Settings | None = None
) -> str:
    """
    Remove all scaffolding from the working directory's ball and put its
    original files back.
    """
    payload, reserved, settings = _resolve(payload, reserved, settings)
    root = Path(cwd or Path.cwd()).resolve()

    teardown_ball(root, reserved, verbose=settings.verbose, prefix=DESTROY_PREFIX)
    return f'Destroyed "{root.name}" ball'


# Older name for destroy
unball = destroy


def update(*args, **kwargs) -> str:
    """Update the current ball to the latest scripts."""
    raise NotImplementedCommand("update not yet implemented", prefix="Could not update ball")


def deploy(*args, **kwargs) -> str:
    """Deploy the current ball."""
    raise NotImplementedCommand("deploy not yet implemented", prefix="Could not deploy ball")
