"""
json_dto_codegen
================

Turns a sample JSON payload into nested C# data-transfer-object classes.

The pieces, bottom-up:

* :mod:`json_dto_codegen.naming` maps JSON keys and caller-supplied names to
  C# identifiers (``Class``/``Property`` prefixes for non-letter starts).
* :mod:`json_dto_codegen.compiler` walks the parsed document: objects become
  nested classes, arrays become wrapper classes with an ``Items`` collection
  typed from their first element.
* :mod:`json_dto_codegen.api` parses JSON text and writes
  ``<Name>Handler.cs`` files whose root class is ``<Name>Request``.
* :mod:`json_dto_codegen.cli` exposes the same operations on the command line.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed package version or '0.0.0' when unavailable."""
    try:
        return version("json_dto_codegen")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
