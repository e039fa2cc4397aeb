import pytest

from json_dto_codegen.errors import CodegenError, InvalidIdentifierError
from json_dto_codegen.naming import (
    INVALID_FILE_NAME_CHARS,
    normalize_member_name,
    normalize_type_name,
)

SEEDS = [
    "Person",
    "order list",
    "1st/item",
    "my-type",
    "a:b*c?d",
    "_private",
    "9",
    'quo"ted<>|',
    "tab\there",
    "Ünïcode name",
    "$value",
]


def test_type_name_strips_spaces_and_invalid_file_chars() -> None:
    assert normalize_type_name("order list") == "orderlist"
    assert normalize_type_name("a:b*c?d") == "abcd"
    assert normalize_type_name('x"<>|/\\y') == "xy"
    assert normalize_type_name("tab\there") == "tabhere"


def test_type_name_keeps_hyphens() -> None:
    assert normalize_type_name("my-type") == "my-type"


def test_type_name_prefixes_non_letter_start() -> None:
    assert normalize_type_name("1st/item") == "Class1stitem"
    assert normalize_type_name("_private") == "Class_private"
    assert normalize_type_name(" 9") == "Class9"


def test_type_name_leaves_valid_names_alone() -> None:
    assert normalize_type_name("Root") == "Root"
    assert normalize_type_name("Ünïcode") == "Ünïcode"


@pytest.mark.parametrize("seed", SEEDS)
def test_type_name_invariants(seed: str) -> None:
    name = normalize_type_name(seed)
    assert name[0].isalpha()
    assert " " not in name
    assert not set(name) & INVALID_FILE_NAME_CHARS
    assert normalize_type_name(name) == name


def test_member_name_strips_spaces_and_hyphens() -> None:
    assert normalize_member_name("first name") == "firstname"
    assert normalize_member_name("x-request-id") == "xrequestid"


def test_member_name_keeps_leading_digit_behind_prefix() -> None:
    assert normalize_member_name("1bad name-x") == "Property1badnamex"
    assert normalize_member_name("-1") == "Property1"
    assert normalize_member_name("$ref") == "Property$ref"


@pytest.mark.parametrize("seed", SEEDS)
def test_member_name_invariants(seed: str) -> None:
    name = normalize_member_name(seed)
    assert name[0].isalpha()
    assert " " not in name
    assert "-" not in name
    assert normalize_member_name(name) == name


@pytest.mark.parametrize("seed", ["", "   ", "?:*", "/"])
def test_degenerate_type_seed_raises(seed: str) -> None:
    with pytest.raises(InvalidIdentifierError) as excinfo:
        normalize_type_name(seed)
    assert excinfo.value.role == "type"
    assert isinstance(excinfo.value, CodegenError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("seed", ["", " ", "- -", "---"])
def test_degenerate_member_seed_raises(seed: str) -> None:
    with pytest.raises(InvalidIdentifierError, match="member"):
        normalize_member_name(seed)


def test_non_string_seed_raises() -> None:
    with pytest.raises(InvalidIdentifierError):
        normalize_type_name(None)  # type: ignore[arg-type]
