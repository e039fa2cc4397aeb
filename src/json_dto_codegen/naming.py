"""Identifier normalization for generated type and member names.

Both helpers are pure: the same seed always maps to the same identifier and
no registry of previously issued names is kept, so two sibling seeds that
normalize identically produce identical (colliding) identifiers.
"""

from __future__ import annotations

from .errors import InvalidIdentifierError

TYPE_NAME_PREFIX = "Class"
MEMBER_NAME_PREFIX = "Property"

# Windows invalid file-name characters, used as a fixed platform-independent list.
INVALID_FILE_NAME_CHARS = frozenset('"<>|:*?\\/' + "".join(chr(code) for code in range(32)))

_TYPE_NAME_STRIP = INVALID_FILE_NAME_CHARS | {" "}
_MEMBER_NAME_STRIP = frozenset(" -")


def _normalize(seed: str, strip: frozenset[str], prefix: str, role: str) -> str:
    if not isinstance(seed, str):
        raise InvalidIdentifierError(seed, role)
    cleaned = "".join(ch for ch in seed if ch not in strip)
    if not cleaned:
        raise InvalidIdentifierError(seed, role)
    if not cleaned[0].isalpha():
        cleaned = prefix + cleaned
    return cleaned


def normalize_type_name(seed: str) -> str:
    """Turn ``seed`` into a class name.

    Spaces and invalid file-name characters are removed; ``Class`` is
    prepended when the remainder does not start with a letter.
    """
    return _normalize(seed, _TYPE_NAME_STRIP, TYPE_NAME_PREFIX, "type")


def normalize_member_name(seed: str) -> str:
    """Turn ``seed`` into a property name (drops spaces/hyphens, ``Property`` prefix)."""
    return _normalize(seed, _MEMBER_NAME_STRIP, MEMBER_NAME_PREFIX, "member")


__all__ = [
    "INVALID_FILE_NAME_CHARS",
    "MEMBER_NAME_PREFIX",
    "TYPE_NAME_PREFIX",
    "normalize_member_name",
    "normalize_type_name",
]
