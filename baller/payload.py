"""
Scaffold payload and the reserved name set derived from it.

The payload is read-only data bundled with baller:

    payload/
        scripts/            lifecycle scripts, copied flat into the ball
            hooks/          hook scripts, copied into <ball>/hooks/
        templates/          Jinja2 templates, rendered into the ball

Reserved names are computed once from a listing of the payload and passed
explicitly to the classifier, relocation and teardown.
"""

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, StrictUndefined

from .config import DEFAULT_PAYLOAD_DIR, META_DIR, TEMPLATE_SUFFIX, VCS_DIRS


@dataclass(frozen=True)
class Payload:
    """Location of a scaffold payload tree."""

    root: Path = DEFAULT_PAYLOAD_DIR

    @property
    def scripts_dir(self) -> Path:
        return self.root / "scripts"

    @property
    def templates_dir(self) -> Path:
        return self.root / "templates"

    def script_names(self) -> list[str]:
        """Top-level entries of scripts/, including the hooks directory."""
        return sorted(p.name for p in self.scripts_dir.iterdir())

    def template_names(self) -> list[str]:
        return sorted(p.name for p in self.templates_dir.iterdir() if p.is_file())


def rendered_name(template_name: str) -> str:
    """README.md.j2 -> README.md"""
    if template_name.endswith(TEMPLATE_SUFFIX):
        return template_name[: -len(TEMPLATE_SUFFIX)]
    return template_name


@dataclass(frozen=True)
class ReservedNames:
    """
    Top-level names the scaffolding claims inside a ball.

    Attributes:
        scaffold: Names the ball owns; deleted on teardown.
        ignored: Names never treated as user content and never deleted
            (version-control directories).
    """

    scaffold: frozenset[str]
    ignored: frozenset[str] = VCS_DIRS

    def __contains__(self, name: str) -> bool:
        return name in self.scaffold or name in self.ignored


def build_reserved_names(payload: Payload) -> ReservedNames:
    """
    List the payload once and build the reserved name set.

    Args:
        payload: Payload whose scripts and templates define the scaffolding.

    Returns:
        ReservedNames covering the marker, every top-level script entry and
        every rendered template name.
    """
    scaffold = {META_DIR}
    scaffold.update(payload.script_names())
    scaffold.update(rendered_name(t) for t in payload.template_names())
    return ReservedNames(scaffold=frozenset(scaffold))


# Jinja2 environment shared by all renders; missing variables are errors
_env = Environment(
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def render_template(text: str, variables: dict) -> str:
    """Render template text with the given variables."""
    return _env.from_string(text).render(**variables)
