"""
Error definitions for baller.

Every failure surfaces to the caller as a single BallerError whose message is
"<command prefix>: <reason>". Lower-level OSErrors are chained, never shown.
"""

from typing import Any


class BallerError(RuntimeError):
    """
    Base error for every ball command.

    Usage:
        raise IOFailure("metadata creation failed", prefix=CREATE_PREFIX) from exc
    """

    kind = "BallerError"

    def __init__(self, reason: str, prefix: str = "Error", **context: Any) -> None:
        self.reason = reason
        self.prefix = prefix
        self.context = context
        super().__init__(f"{prefix}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": str(self),
            **self.context,
        }


class InvalidArgument(BallerError):
    """Missing or empty ball name."""

    kind = "InvalidArgument"


class AlreadyExists(BallerError):
    """Target directory or sentinel marker already present."""

    kind = "AlreadyExists"


class NotManaged(BallerError):
    """Teardown requested on a directory without a sentinel marker."""

    kind = "NotManaged"


class IOFailure(BallerError):
    """Filesystem failure, labelled with the stage that hit it."""

    kind = "IOFailure"


class NotImplementedCommand(BallerError):
    """Command declared on the CLI but not built yet (update, deploy)."""

    kind = "NotImplemented"


# =============================================================================
# Message prefixes and stage labels
# =============================================================================

CREATE_PREFIX = "Could not create ball"
INIT_PREFIX = "Could not initialize ball"
DESTROY_PREFIX = "Could not destroy ball"

FILES_STAGE = "files subdirectory creation failed"
METADATA_STAGE = "metadata creation failed"
README_STAGE = "README creation failed"
SCRIPTS_STAGE = "scripts creation failed"
DESTROY_STAGE = "destroy failed"
