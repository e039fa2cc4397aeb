import pytest

from json_dto_codegen.compiler import ShapeCompiler
from json_dto_codegen.config import GeneratorConfig


@pytest.fixture()
def compiler() -> ShapeCompiler:
    return ShapeCompiler()


@pytest.fixture()
def order_payload() -> str:
    return """
    {
        "orderId": 1042,
        "customer": {"first name": "Ada", "vip": true},
        "lines": [
            {"sku": "A-1", "qty": 2, "discount": null},
            {"sku": "B-7", "qty": 1, "gift": true}
        ],
        "notes": []
    }
    """


@pytest.fixture()
def compact_config() -> GeneratorConfig:
    return GeneratorConfig(
        indent=2,
        types={"number": "decimal", "collection": "IList<{}>"},
    )
