"""
Baller
======

Turns a directory into a "ball": its original contents move into `files/`
and a standard set of metadata, documentation and lifecycle scripts is
installed around them. `destroy` reverses the transformation.
"""

__version__ = "0.2.0"

from .core import create, init, destroy, unball, update, deploy
from .errors import (
    BallerError,
    InvalidArgument,
    AlreadyExists,
    NotManaged,
    IOFailure,
    NotImplementedCommand,
)
from .payload import Payload, ReservedNames, build_reserved_names

__all__ = [
    "create",
    "init",
    "destroy",
    "unball",
    "update",
    "deploy",
    "BallerError",
    "InvalidArgument",
    "AlreadyExists",
    "NotManaged",
    "IOFailure",
    "NotImplementedCommand",
    "Payload",
    "ReservedNames",
    "build_reserved_names",
]
