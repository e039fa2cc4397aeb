"""Exception hierarchy for DTO generation."""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for every failure raised by the generator."""


class InvalidIdentifierError(CodegenError, ValueError):
    """A name seed strips down to nothing and cannot become an identifier."""

    def __init__(self, seed: object, role: str) -> None:
        self.seed = seed
        self.role = role
        super().__init__(f"Cannot derive a {role} name from {seed!r}: no usable characters remain")


class MalformedJsonError(CodegenError, ValueError):
    """The supplied text is not a valid JSON document."""


class NestingTooDeepError(CodegenError):
    """The document nests deeper than the generator is allowed to descend."""
