from datetime import datetime
from decimal import Decimal

import pytest
from bson import Decimal128, ObjectId

from jobboard.utils.serialization import JSONSerializer, coerce_number


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, 3),
        (2.5, 2.5),
        ("3", 3.0),
        (" 1.25 ", 1.25),
        (Decimal("4.0"), 4.0),
        (Decimal128("6.5"), 6.5),
        (None, None),
        (False, None),
        ("", None),
        ("three", None),
        ("NaN", None),
        ("inf", None),
        (float("-inf"), None),
        (Decimal128("NaN"), None),
    ],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_make_serializable_converts_bson_values():
    oid = ObjectId()
    data = {
        "_id": oid,
        "postedOn": datetime(2024, 1, 2, 3, 4, 5),
        "rating": Decimal128("4.5"),
        "tags": ("a", "b"),
    }

    assert JSONSerializer.make_serializable(data) == {
        "_id": str(oid),
        "postedOn": "2024-01-02T03:04:05",
        "rating": 4.5,
        "tags": ["a", "b"],
    }
