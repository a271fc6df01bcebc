"""Conversion of presented documents to JSON.

Presenting produces plain dictionaries and lists whose leaves may still be
rich Python values. :func:`jsonable` reduces such a tree to values the
standard :mod:`json` module can encode; :func:`to_json` does both steps.
"""

import json
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

__all__ = ["jsonable", "to_json"]


def jsonable(value: Any) -> Any:
    """Convert a document tree to JSON-compatible values.

    Conversions:
        - Enums become their values.
        - Dates, times and datetimes become ISO 8601 strings.
        - Decimals and UUIDs become strings.
        - Mappings become dicts with string keys; tuples, lists and sets
          become lists.
        - Objects with an ``as_json()`` method (such as presenter instances)
          are replaced by its result.
        - Other objects become a dict of their public instance attributes,
          or their string form when they have none.
    """
    if isinstance(value, Enum):
        return jsonable(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, Mapping):
        return {str(key): jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [jsonable(item) for item in value]

    as_json = getattr(value, "as_json", None)
    if callable(as_json):
        return jsonable(as_json())

    attributes = getattr(value, "__dict__", None)
    if attributes is not None:
        return {key: jsonable(item) for key, item in attributes.items() if not key.startswith("_")}
    return str(value)


def to_json(document: Any, **json_options: Any) -> str:
    """Encode a document as JSON.

    Args:
        document: A presented document.
        **json_options: Passed to :func:`json.dumps`. Output is compact
            unless ``separators`` or ``indent`` is given.

    Returns:
        The encoded document.
    """
    if "indent" not in json_options:
        json_options.setdefault("separators", (",", ":"))
    return json.dumps(jsonable(document), **json_options)
