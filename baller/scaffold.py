"""
Installation of the scaffold payload into a ball.

Scripts (including the hooks subtree) are copied with their permission bits;
templates are rendered with Jinja2 into files named without the .j2 suffix.
"""

import os
import shutil
from pathlib import Path

from jinja2 import TemplateError

from .errors import README_STAGE, SCRIPTS_STAGE, IOFailure
from .payload import Payload, render_template, rendered_name


def copy_tree(src: Path, dst: Path) -> list[Path]:
    """
    Recursively copy src's contents into dst, preserving file modes.

    Directories are created before recursing into them; existing files are
    overwritten.

    Args:
        src: Source directory.
        dst: Destination directory (must exist).

    Returns:
        Destination paths of copied files.
    """
    copied = []
    for entry in sorted(os.listdir(src)):
        src_path = Path(src) / entry
        dst_path = Path(dst) / entry
        if src_path.is_dir():
            dst_path.mkdir(exist_ok=True)
            copied.extend(copy_tree(src_path, dst_path))
        else:
            shutil.copyfile(src_path, dst_path)
            shutil.copymode(src_path, dst_path)
            copied.append(dst_path)
    return copied


def install_scripts(payload: Payload, root: Path, prefix: str = "Error") -> list[Path]:
    """
    Copy every payload script into root.

    Raises:
        IOFailure: Any copy or directory creation failed.
    """
    try:
        return copy_tree(payload.scripts_dir, Path(root))
    except OSError as e:
        raise IOFailure(SCRIPTS_STAGE, prefix=prefix) from e


def write_readme(
    payload: Payload,
    root: Path,
    name: str,
    username: str,
    prefix: str = "Error"
) -> list[Path]:
    """
    Render every payload template into root.

    Args:
        payload: Payload holding the templates.
        root: Ball root.
        name: Ball name.
        username: User the ball belongs to.
        prefix: Command label for error messages.

    Returns:
        Paths of the rendered files.

    Raises:
        IOFailure: Reading, rendering or writing a template failed.
    """
    variables = {"name": name, "username": username}
    written = []
    try:
        for template in payload.template_names():
            text = (payload.templates_dir / template).read_text(encoding="utf-8")
            out = Path(root) / rendered_name(template)
            out.write_text(render_template(text, variables), encoding="utf-8")
            written.append(out)
    except (OSError, UnicodeDecodeError, TemplateError) as e:
        raise IOFailure(README_STAGE, prefix=prefix) from e
    return written
