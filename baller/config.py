"""
Configuration for baller.

Fixed ball layout names plus environment-derived settings.
"""

import getpass
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Ball layout
META_DIR = ".baller"
VERSION_FILE = "version"
FILES_DIR = "files"
HOOKS_DIR = "hooks"
README_FILE = "README.md"

# Never relocated into files/, never deleted on teardown
VCS_DIRS = frozenset({".git"})

# Suffix stripped from a template name to get the rendered file name
TEMPLATE_SUFFIX = ".j2"

# Bundled payload shipped inside the package
DEFAULT_PAYLOAD_DIR = Path(__file__).resolve().parent / "payload"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    username: str
    payload_dir: Path = DEFAULT_PAYLOAD_DIR
    verbose: bool = False


def get_username() -> str:
    """
    Return the user name rendered into README.md.

    BALLER_USER wins over USER; getpass is the last resort.
    """
    for var in ("BALLER_USER", "USER"):
        value = os.environ.get(var, "").strip()
        if value:
            return value
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def load_settings(env_file: Path | None = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional .env file; defaults to python-dotenv's lookup.

    Returns:
        Settings with username, payload_dir and verbose resolved.
    """
    load_dotenv(env_file)

    payload_dir = os.environ.get("BALLER_PAYLOAD_DIR", "").strip()
    verbose = os.environ.get("BALLER_VERBOSE", "").strip().lower() in TRUTHY

    return Settings(
        username=get_username(),
        payload_dir=Path(payload_dir).expanduser() if payload_dir else DEFAULT_PAYLOAD_DIR,
        verbose=verbose,
    )
