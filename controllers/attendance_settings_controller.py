import logging

from flask import Blueprint

from models.attendance_settings import AttendanceSettings
from utils.crud import delete_document, get_or_404, insert_document, update_document
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid attendance settings ID"
NOT_FOUND = "Attendance settings not found"


def create_attendance_settings_blueprint(settings):
    """Smart attendance keeps one settings document for the whole institute."""
    attendance_bp = Blueprint("smart_attendance", __name__, url_prefix="/api/smart-attendance")

    # -----------------------------
    # VIEW SETTINGS
    # -----------------------------
    @attendance_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching attendance settings")
    def get_settings():
        return success(settings.find_one())

    # -----------------------------
    # SAVE SETTINGS (insert or update)
    # -----------------------------
    @attendance_bp.route("", methods=["POST"])
    @handle_storage_errors("Error saving attendance settings")
    def save_settings():
        fields = AttendanceSettings.from_payload(json_body()).to_dict()

        with scoped_lock(settings.name):
            existing = settings.find_one()
            if existing:
                document = update_document(settings, existing["_id"], fields, NOT_FOUND)
                logger.info("Attendance settings updated")
                return success(document, "Attendance settings updated successfully")
            document = insert_document(settings, fields)

        logger.info("Attendance settings created")
        return success(document, "Attendance settings created successfully", 201)

    @attendance_bp.route("/<settings_id>", methods=["GET"])
    @handle_storage_errors("Error fetching attendance settings")
    def get_settings_by_id(settings_id):
        oid = parse_object_id(settings_id, INVALID_ID)
        return success(get_or_404(settings, oid, NOT_FOUND))

    @attendance_bp.route("/<settings_id>", methods=["PUT"])
    @handle_storage_errors("Error updating attendance settings")
    def update_settings(settings_id):
        oid = parse_object_id(settings_id, INVALID_ID)
        current = get_or_404(settings, oid, NOT_FOUND)
        changes = AttendanceSettings.changes_from_payload(json_body(), current)
        document = update_document(settings, oid, changes, NOT_FOUND)
        return success(document, "Attendance settings updated successfully")

    @attendance_bp.route("/<settings_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting attendance settings")
    def delete_settings(settings_id):
        oid = parse_object_id(settings_id, INVALID_ID)
        delete_document(settings, oid, NOT_FOUND)
        return success(message="Attendance settings deleted successfully")

    return attendance_bp
