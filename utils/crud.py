"""
utils/crud.py
-----------------
The single-collection building blocks every resource blueprint uses:
timestamps, lookups that raise NotFoundError, duplicate checks and
optional list filters.
"""

import re
from datetime import datetime, timedelta

from utils.errors import NotFoundError, ValidationError
from utils.validation import clean_string, parse_bool, parse_object_id


def utcnow():
    # MongoDB keeps millisecond precision
    now = datetime.utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def name_pattern(name):
    """Case-insensitive exact match for a user supplied name."""
    return {"$regex": f"^{re.escape(clean_string(name))}$", "$options": "i"}


def find_duplicate(collection, query, exclude_id=None):
    if exclude_id is not None:
        query = dict(query, _id={"$ne": exclude_id})
    return collection.find_one(query)


def get_or_404(collection, oid, message):
    document = collection.find_one({"_id": oid})
    if not document:
        raise NotFoundError(message)
    return document


def insert_document(collection, fields):
    now = utcnow()
    document = dict(fields, createdAt=now, updatedAt=now)
    result = collection.insert_one(document)
    document["_id"] = result.inserted_id
    return document


def update_document(collection, oid, fields, message):
    result = collection.update_one(
        {"_id": oid},
        {"$set": dict(fields, updatedAt=utcnow())}
    )
    if result.matched_count == 0:
        raise NotFoundError(message)
    return collection.find_one({"_id": oid})


def delete_document(collection, oid, message):
    result = collection.delete_one({"_id": oid})
    if result.deleted_count == 0:
        raise NotFoundError(message)


def newest_first(collection, query=None):
    return list(collection.find(query or {}).sort("createdAt", -1))


def left_join(from_collection, local_field, as_field):
    """$lookup + $unwind stages that keep the row when the reference is missing."""
    return [
        {"$lookup": {
            "from": from_collection,
            "localField": local_field,
            "foreignField": "_id",
            "as": as_field,
        }},
        {"$unwind": {"path": f"${as_field}", "preserveNullAndEmptyArrays": True}},
    ]


def shape_joined(documents, as_field, fields=None):
    """
    A missing reference comes back without the joined key at all; expose
    it as null. With `fields`, only `_id` and those keys are kept.
    """
    for document in documents:
        joined = document.get(as_field)
        if not joined:
            document[as_field] = None
        elif fields:
            document[as_field] = {k: joined.get(k) for k in ("_id",) + tuple(fields)}
    return documents


def build_filters(args, fields=(), id_fields=(), bool_fields=(), date_field=None):
    """
    Turn query-string parameters into an equality filter.
    `date` (YYYY-MM-DD) matches documents whose `date_field` falls on that day.
    """
    query = {}
    for field in fields:
        value = clean_string(args.get(field))
        if value:
            query[field] = value
    for field in id_fields:
        value = clean_string(args.get(field))
        if value:
            query[field] = parse_object_id(value, f"Invalid {field}")
    for field in bool_fields:
        if field in args:
            query[field] = parse_bool(args.get(field))
    if date_field:
        day = clean_string(args.get("date"))
        if day:
            try:
                start = datetime.strptime(day, "%Y-%m-%d")
            except ValueError:
                raise ValidationError("date must be formatted as YYYY-MM-DD")
            query[date_field] = {"$gte": start, "$lt": start + timedelta(days=1)}
    return query
