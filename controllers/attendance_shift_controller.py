import logging

from flask import Blueprint

from models.attendance_shift import AttendanceShift
from utils.crud import (
    delete_document, find_duplicate, get_or_404, insert_document,
    left_join, name_pattern, shape_joined, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid shift ID"
NOT_FOUND = "Shift not found"
DUPLICATE = "A shift with this name already exists"


def create_attendance_shift_blueprint(shifts, classes, sections):
    shift_bp = Blueprint("smart_attendance_shift", __name__, url_prefix="/api/smart-attendance-shift")

    # -----------------------------
    # VIEW SHIFTS (with class and section)
    # -----------------------------
    @shift_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching shifts")
    def list_shifts():
        pipeline = (
            left_join(classes.name, "class", "class")
            + left_join(sections.name, "section", "section")
            + [{"$sort": {"createdAt": -1}}]
        )
        documents = list(shifts.aggregate(pipeline))
        shape_joined(documents, "class")
        shape_joined(documents, "section")
        return success(documents)

    @shift_bp.route("/<shift_id>", methods=["GET"])
    @handle_storage_errors("Error fetching shift")
    def get_shift(shift_id):
        oid = parse_object_id(shift_id, INVALID_ID)
        return success(get_or_404(shifts, oid, NOT_FOUND))

    # -----------------------------
    # ADD SHIFT
    # -----------------------------
    @shift_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating shift")
    def create_shift():
        shift = AttendanceShift.from_payload(json_body())

        with scoped_lock(shifts.name, shift.shift_name.lower()):
            if find_duplicate(shifts, {"shiftName": name_pattern(shift.shift_name)}):
                raise DuplicateError(DUPLICATE)
            document = insert_document(shifts, shift.to_dict())

        logger.info("Shift created: %s", shift.shift_name)
        return success(document, "Shift created successfully", 201)

    # -----------------------------
    # EDIT / UPDATE SHIFT
    # -----------------------------
    @shift_bp.route("/<shift_id>", methods=["PUT"])
    @handle_storage_errors("Error updating shift")
    def update_shift(shift_id):
        oid = parse_object_id(shift_id, INVALID_ID)
        current = get_or_404(shifts, oid, NOT_FOUND)
        changes = AttendanceShift.changes_from_payload(json_body(), current)

        shift_name = changes.get("shiftName", current.get("shiftName", ""))
        with scoped_lock(shifts.name, shift_name.lower()):
            if "shiftName" in changes and find_duplicate(
                    shifts, {"shiftName": name_pattern(shift_name)}, exclude_id=oid):
                raise DuplicateError(DUPLICATE)
            document = update_document(shifts, oid, changes, NOT_FOUND)

        return success(document, "Shift updated successfully")

    # -----------------------------
    # DELETE SHIFT
    # -----------------------------
    @shift_bp.route("/<shift_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting shift")
    def delete_shift(shift_id):
        oid = parse_object_id(shift_id, INVALID_ID)
        delete_document(shifts, oid, NOT_FOUND)
        logger.info("Shift deleted: %s", shift_id)
        return success(message="Shift deleted successfully")

    return shift_bp
