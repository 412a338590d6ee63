import logging

from flask import Blueprint

from models.named_entry import Menu, Playlist
from utils.crud import (
    delete_document, find_duplicate, get_or_404, insert_document,
    name_pattern, newest_first, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

MENU_MESSAGES = {
    "invalid_id": "অবৈধ মেনু আইডি",
    "not_found": "মেনু পাওয়া যায়নি",
    "duplicate": "এই নামের মেনু ইতিমধ্যে বিদ্যমান",
    "created": "মেনু সফলভাবে তৈরি হয়েছে",
    "updated": "মেনু সফলভাবে আপডেট হয়েছে",
    "deleted": "মেনু সফলভাবে ডিলিট হয়েছে",
    "list_failed": "মেনু লোড করতে সমস্যা হয়েছে",
    "get_failed": "মেনু ডেটা আনতে সমস্যা হয়েছে",
    "create_failed": "মেনু তৈরি করতে সমস্যা হয়েছে",
    "update_failed": "মেনু আপডেট করতে সমস্যা হয়েছে",
    "delete_failed": "মেনু ডিলিট করতে সমস্যা হয়েছে",
}

PLAYLIST_MESSAGES = {
    "invalid_id": "অবৈধ প্লেলিস্ট আইডি",
    "not_found": "প্লেলিস্ট পাওয়া যায়নি",
    "duplicate": "এই নামের প্লেলিস্ট ইতিমধ্যে বিদ্যমান",
    "created": "প্লেলিস্ট সফলভাবে তৈরি হয়েছে",
    "updated": "প্লেলিস্ট সফলভাবে আপডেট হয়েছে",
    "deleted": "প্লেলিস্ট সফলভাবে ডিলিট হয়েছে",
    "list_failed": "প্লেলিস্ট লোড করতে সমস্যা হয়েছে",
    "get_failed": "প্লেলিস্ট ডেটা আনতে সমস্যা হয়েছে",
    "create_failed": "প্লেলিস্ট তৈরি করতে সমস্যা হয়েছে",
    "update_failed": "প্লেলিস্ট আপডেট করতে সমস্যা হয়েছে",
    "delete_failed": "প্লেলিস্ট ডিলিট করতে সমস্যা হয়েছে",
}


def create_menu_blueprint(menus):
    return _create_named_entry_blueprint("menus", "/api/menus", menus, Menu, MENU_MESSAGES)


def create_playlist_blueprint(playlists):
    return _create_named_entry_blueprint("playlists", "/api/playlists", playlists, Playlist, PLAYLIST_MESSAGES)


# Menus and playlists are the same resource shape: a unique name and nothing else.
def _create_named_entry_blueprint(name, url_prefix, collection, model, messages):
    bp = Blueprint(name, __name__, url_prefix=url_prefix)

    # -----------------------------
    # VIEW ALL
    # -----------------------------
    @bp.route("", methods=["GET"])
    @handle_storage_errors(messages["list_failed"])
    def list_entries():
        return success(newest_first(collection))

    # -----------------------------
    # VIEW ONE
    # -----------------------------
    @bp.route("/<entry_id>", methods=["GET"])
    @handle_storage_errors(messages["get_failed"])
    def get_entry(entry_id):
        oid = parse_object_id(entry_id, messages["invalid_id"])
        return success(get_or_404(collection, oid, messages["not_found"]))

    # -----------------------------
    # ADD
    # -----------------------------
    @bp.route("", methods=["POST"])
    @handle_storage_errors(messages["create_failed"])
    def create_entry():
        entry = model.from_payload(json_body())

        with scoped_lock(collection.name, entry.name.lower()):
            if find_duplicate(collection, {"name": name_pattern(entry.name)}):
                raise DuplicateError(messages["duplicate"])
            document = insert_document(collection, entry.to_dict())

        return success(document, messages["created"], 201)

    # -----------------------------
    # EDIT / UPDATE
    # -----------------------------
    @bp.route("/<entry_id>", methods=["PUT"])
    @handle_storage_errors(messages["update_failed"])
    def update_entry(entry_id):
        oid = parse_object_id(entry_id, messages["invalid_id"])
        payload = json_body()
        existing = get_or_404(collection, oid, messages["not_found"])
        new_name = model.name_from_update(payload, existing["name"])

        with scoped_lock(collection.name, new_name.lower()):
            if find_duplicate(collection, {"name": name_pattern(new_name)}, exclude_id=oid):
                raise DuplicateError(messages["duplicate"])
            document = update_document(collection, oid, model(new_name).to_dict(), messages["not_found"])

        return success(document, messages["updated"])

    # -----------------------------
    # DELETE
    # -----------------------------
    @bp.route("/<entry_id>", methods=["DELETE"])
    @handle_storage_errors(messages["delete_failed"])
    def delete_entry(entry_id):
        oid = parse_object_id(entry_id, messages["invalid_id"])
        delete_document(collection, oid, messages["not_found"])
        logger.info("Deleted %s %s", name, oid)
        return success(message=messages["deleted"])

    return bp
