"""Decode errors for pass documents.

Every error carries the path (sequence of keys and list indices) from the
document root to the offending value.
"""

from __future__ import annotations

from collections.abc import Iterable

PathPart = str | int
ErrorPath = tuple[PathPart, ...]


def format_path(path: Iterable[PathPart]) -> str:
    """Render a path as ``SequencePass.sequence[1].StandardPass.name``."""
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        elif out:
            out += f".{part}"
        else:
            out = str(part)
    return out or "<root>"


class PassDecodeError(ValueError):
    """Base class for all decoding failures."""

    kind = "DecodeError"

    def __init__(self, detail: str, path: Iterable[PathPart] = ()):
        self.detail = detail
        self.path: ErrorPath = tuple(path)
        super().__init__(f"{format_path(self.path)}: {detail}")


class TagMismatchError(PassDecodeError):
    """``pass_class`` names a payload field that is not in the envelope."""

    kind = "TagMismatch"


class UnknownVariantError(PassDecodeError):
    """``pass_class`` is not one of the five outer discriminants."""

    kind = "UnknownVariant"


class StrictShapeError(PassDecodeError):
    """Unexpected extra fields, or a required field is missing."""

    kind = "StrictShape"


class TypeMismatchError(PassDecodeError):
    """A value does not have the JSON type its field declares."""

    kind = "TypeMismatch"


class DepthExceededError(PassDecodeError):
    """Passes are nested deeper than the configured maximum."""

    kind = "DepthExceeded"


class PassDocumentError(PassDecodeError):
    """The text is not a JSON document at all."""

    kind = "MalformedDocument"
