"""
JSON serialization utilities for documents read from MongoDB.

Converts BSON-specific values (ObjectId, datetime, Decimal128) and pydantic
models into plain JSON-compatible structures.
"""

import math
from datetime import datetime, date
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from bson import ObjectId
from bson.decimal128 import Decimal128


class JSONSerializer:
    """
    Centralized JSON serialization utility class.
    """

    @staticmethod
    def make_serializable(obj: Any) -> Any:
        """
        Convert objects to JSON-serializable format.

        Args:
            obj: The object to make serializable

        Returns:
            JSON-serializable representation of the object
        """
        if obj is None or isinstance(obj, (str, int, float, bool)):
            return obj

        if hasattr(obj, "model_dump"):
            return JSONSerializer.make_serializable(
                obj.model_dump(by_alias=True, mode="json")
            )

        if isinstance(obj, ObjectId):
            return str(obj)

        if isinstance(obj, (datetime, date)):
            return obj.isoformat()

        if isinstance(obj, UUID):
            return str(obj)

        if isinstance(obj, Decimal128):
            obj = obj.to_decimal()

        if isinstance(obj, Decimal):
            return float(obj)

        if isinstance(obj, dict):
            return {
                str(key): JSONSerializer.make_serializable(value)
                for key, value in obj.items()
            }

        if isinstance(obj, (list, tuple, set, frozenset)):
            return [JSONSerializer.make_serializable(item) for item in obj]

        return str(obj)


def coerce_number(value: Any) -> Optional[float]:
    """
    Read a numeric document field stored as a number, Decimal128 or numeric text.

    Booleans, unparseable text and non-finite values (NaN, infinity) yield None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal128):
        value = value.to_decimal()
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    return number if math.isfinite(number) else None
