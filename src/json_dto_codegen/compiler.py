"""JSON shape inference and C# declaration emission."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from .config import GeneratorConfig
from .errors import NestingTooDeepError
from .naming import normalize_member_name, normalize_type_name
from .shapes import JsonKind, kind_of, primitive_type

ITEMS_PROPERTY = "Items"
ITEM_TYPE_SUFFIX = "Item"

# (absolute indent level, text)
Line = tuple[int, str]


class ShapeCompiler:
    """Walks a parsed JSON value and emits nested class declarations.

    Nested objects are visited depth-first with an explicit stack, so document
    depth is bounded only by ``max_depth``. Emitted lines carry their absolute
    indent level and are padded once when rendered.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self._pad = " " * self.config.indent

    def generate(self, value: Any, name_seed: str) -> str:
        """Return the declaration(s) for ``value`` named after ``name_seed``."""
        if kind_of(value) is JsonKind.OBJECT:
            lines = self._walk_object(value, name_seed)
        else:
            lines = [(0, line) for line in self._emit_flat(value, name_seed, depth=0)]
        return "\n".join(f"{self._pad * level}{text}" if text else text for level, text in lines)

    def _walk_object(self, value: Mapping[str, Any], name_seed: str) -> list[Line]:
        out: list[Line] = []
        stack = [self._open_class(out, value, name_seed, level=0)]
        while stack:
            level, children = stack[-1]
            for key, child in children:
                if kind_of(child) is JsonKind.OBJECT:
                    stack.append(self._open_class(out, child, key, level + 1))
                    break
                out.extend((level + 1, line) for line in self._emit_flat(child, key, level + 1))
            else:
                stack.pop()
                out.append((level, "}"))
        return out

    def _open_class(
        self, out: list[Line], value: Mapping[str, Any], name_seed: str, level: int
    ) -> tuple[int, Iterator[tuple[str, Any]]]:
        self._descend(level)
        out.append((level, f"public class {normalize_type_name(name_seed)}"))
        out.append((level, "{"))
        return level, iter(value.items())

    def _emit_flat(self, value: Any, name_seed: str, depth: int) -> list[str]:
        if kind_of(value) is JsonKind.ARRAY:
            return self._emit_array(value, name_seed, self._descend(depth))
        return [self._member(primitive_type(value, self.config.types), name_seed)]

    def _descend(self, depth: int) -> int:
        depth += 1
        limit = self.config.max_depth
        if limit is not None and depth > limit:
            raise NestingTooDeepError(f"Document nests deeper than max_depth={limit}")
        return depth

    def _emit_array(self, value: Sequence[Any], name_seed: str, depth: int) -> list[str]:
        types = self.config.types
        name = normalize_type_name(name_seed)
        if not value:
            untyped = types.collection_of(types.generic)
            return self._class_block(name, [self._member(untyped, ITEMS_PROPERTY)])

        # Only the first element is sampled; later elements never change the shape.
        sample = value[0]
        if kind_of(sample) is not JsonKind.OBJECT:
            collection = types.collection_of(primitive_type(sample, types))
            return self._class_block(name, [self._member(collection, ITEMS_PROPERTY)])

        item_name = name + ITEM_TYPE_SUFFIX
        collection = types.collection_of(item_name)
        # Item members are mapped flat: nested objects/arrays become the generic type.
        item_members = [self._member(primitive_type(v, types), k) for k, v in sample.items()]
        body = [
            f"public {name}()",
            "{",
            f"{self._pad}{ITEMS_PROPERTY} = new {collection}();",
            "}",
            "",
            self._member(collection, ITEMS_PROPERTY),
            "",
            *self._class_block(item_name, item_members),
        ]
        return self._class_block(name, body)

    def _member(self, declared_type: str, name_seed: str) -> str:
        return f"public {declared_type} {normalize_member_name(name_seed)} {{ get; set; }}"

    def _class_block(self, name: str, body: list[str]) -> list[str]:
        return [
            f"public class {name}",
            "{",
            *(f"{self._pad}{line}" if line else line for line in body),
            "}",
        ]


def generate(value: Any, name_seed: str, config: GeneratorConfig | None = None) -> str:
    """Convenience wrapper around :meth:`ShapeCompiler.generate`."""
    return ShapeCompiler(config).generate(value, name_seed)
