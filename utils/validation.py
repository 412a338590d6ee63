"""
utils/validation.py
-----------------
Small helpers shared by the resource models to turn a raw request
body into clean document fields. Every helper raises as soon as the
first problem is found; nothing is collected.
"""

import math

from bson import ObjectId
from flask import request

from utils.errors import InvalidIdError, ValidationError

# Keys the server owns; clients echoing a whole document back may send them.
SERVER_FIELDS = ("_id", "createdAt", "updatedAt")

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off", "")

# Largest integer BSON can store
MAX_INT64 = 2 ** 63 - 1


def clean_string(value):
    return str(value).strip() if value is not None else ""


def is_blank(value):
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return clean_string(value) == ""


def json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def accepted_fields(payload, allowed):
    """Drop server-owned keys and reject anything the resource does not know."""
    cleaned = {k: v for k, v in payload.items() if k not in SERVER_FIELDS}
    for key in cleaned:
        if key not in allowed:
            raise ValidationError(f"Unknown field: {key}")
    return cleaned


def parse_object_id(value, message="Invalid ID"):
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value.strip()):
        raise InvalidIdError(message)
    return ObjectId(value.strip())


def parse_optional_object_id(value, message="Invalid ID"):
    if is_blank(value):
        return None
    return parse_object_id(value, message)


def parse_number(value, message, default=None):
    if is_blank(value):
        if default is not None:
            return default
        raise ValidationError(message)
    if isinstance(value, bool):
        raise ValidationError(message)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(message)
    if not math.isfinite(number):
        raise ValidationError(message)
    return number


def parse_int(value, message, default=None, minimum=None):
    number = parse_number(value, message, default=default)
    if number != int(number):
        raise ValidationError(message)
    number = int(number)
    if abs(number) > MAX_INT64:
        raise ValidationError(message)
    if minimum is not None and number < minimum:
        raise ValidationError(message)
    return number


def parse_bool(value, default=False):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = clean_string(value).lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False if text else default
    raise ValidationError(f"Expected a boolean value, got {value!r}")
