from datetime import datetime

from bson import ObjectId
from flask import jsonify
from flask.json.provider import DefaultJSONProvider

_MISSING = object()


class MongoJSONProvider(DefaultJSONProvider):
    """Render ObjectId as its hex string and datetimes as ISO-8601."""

    @staticmethod
    def default(o):
        if isinstance(o, ObjectId):
            return str(o)
        if isinstance(o, datetime):
            return o.isoformat()
        return DefaultJSONProvider.default(o)


def success(data=_MISSING, message=None, status=200, **extra):
    body = {"success": True}
    if data is not _MISSING:
        body["data"] = data
    if message:
        body["message"] = message
    body.update(extra)
    return jsonify(body), status


def failure(message, status=400, error=None, **extra):
    body = {"success": False, "message": message}
    if error:
        body["error"] = error
    body.update(extra)
    return jsonify(body), status
