from json_dto_codegen.config import TypeMapping
from json_dto_codegen.shapes import JsonKind, kind_of, primitive_type


def test_kind_of_distinguishes_bool_from_number() -> None:
    assert kind_of(True) is JsonKind.BOOLEAN
    assert kind_of(0) is JsonKind.NUMBER
    assert kind_of(1.5) is JsonKind.NUMBER
    assert kind_of("1") is JsonKind.STRING
    assert kind_of(None) is JsonKind.NULL
    assert kind_of({}) is JsonKind.OBJECT
    assert kind_of([]) is JsonKind.ARRAY
    assert kind_of(object()) is None


def test_primitive_type_falls_back_to_generic() -> None:
    types = TypeMapping()
    assert primitive_type("x", types) == "string"
    assert primitive_type(10**30, types) == "double"
    assert primitive_type(False, types) == "bool"
    for value in (None, {}, [], {"a": 1}, object()):
        assert primitive_type(value, types) == "object"


def test_primitive_type_uses_configured_names() -> None:
    types = TypeMapping(text="String", number="Double", boolean="Boolean", generic="dynamic")
    assert primitive_type("x", types) == "String"
    assert primitive_type(3, types) == "Double"
    assert primitive_type(True, types) == "Boolean"
    assert primitive_type(None, types) == "dynamic"
    assert types.collection_of("String") == "List<String>"
