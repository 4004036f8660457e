import os
from pathlib import Path

from baller.config import Settings
from baller.payload import Payload


def make_payload(root: Path) -> Payload:
    """Build a small payload tree with one plain file, two scripts and a hook."""
    scripts = root / "scripts"
    hooks = scripts / "hooks"
    templates = root / "templates"
    hooks.mkdir(parents=True)
    templates.mkdir()

    (scripts / "backup").write_text("#!/bin/sh\necho backup\n")
    os.chmod(scripts / "backup", 0o755)
    (scripts / "restore").write_text("#!/bin/sh\necho restore\n")
    os.chmod(scripts / "restore", 0o750)
    (scripts / "notes.txt").write_text("plain\n")
    os.chmod(scripts / "notes.txt", 0o644)
    (hooks / "pre-install").write_text("#!/bin/sh\n")
    os.chmod(hooks / "pre-install", 0o755)

    (templates / "README.md.j2").write_text("# {{ name }}\nby {{ username }}\n")
    return Payload(root)


def make_settings(payload: Payload | None = None, verbose: bool = False) -> Settings:
    if payload is None:
        return Settings(username="tester", verbose=verbose)
    return Settings(username="tester", payload_dir=payload.root, verbose=verbose)


def tree_snapshot(root: Path) -> dict:
    """Map every relative path under root to its bytes (files) or None (dirs)."""
    snapshot = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for d in dirnames:
            rel = os.path.relpath(os.path.join(dirpath, d), root)
            snapshot[rel] = None
        for f in filenames:
            full = os.path.join(dirpath, f)
            rel = os.path.relpath(full, root)
            with open(full, "rb") as fh:
                snapshot[rel] = (fh.read(), os.stat(full).st_mode)
    return snapshot
