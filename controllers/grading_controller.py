from flask import Blueprint

from models.grading import Grading
from utils.crud import delete_document, get_or_404, insert_document, newest_first, update_document
from utils.guards import handle_storage_errors
from utils.responses import success
from utils.validation import json_body, parse_object_id

INVALID_ID = "Invalid grading ID"
NOT_FOUND = "Grading system not found"


def create_grading_blueprint(gradings):
    grading_bp = Blueprint("grading", __name__, url_prefix="/api/grading")

    # -----------------------------
    # VIEW GRADING SYSTEMS
    # -----------------------------
    @grading_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching grading systems")
    def list_gradings():
        return success(newest_first(gradings), "Grading systems fetched successfully")

    @grading_bp.route("/<grading_id>", methods=["GET"])
    @handle_storage_errors("Error fetching grading system")
    def get_grading(grading_id):
        oid = parse_object_id(grading_id, INVALID_ID)
        return success(get_or_404(gradings, oid, NOT_FOUND), "Grading system fetched successfully")

    # -----------------------------
    # ADD GRADING SYSTEM
    # -----------------------------
    @grading_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating grading system")
    def create_grading():
        grading = Grading.from_payload(json_body())
        document = insert_document(gradings, grading.to_dict())
        return success(document, "Grading system created successfully", 201)

    # -----------------------------
    # EDIT / UPDATE GRADING SYSTEM
    # -----------------------------
    @grading_bp.route("/<grading_id>", methods=["PUT"])
    @handle_storage_errors("Error updating grading system")
    def update_grading(grading_id):
        oid = parse_object_id(grading_id, INVALID_ID)
        grading = Grading.from_payload(json_body())
        document = update_document(gradings, oid, grading.to_dict(), NOT_FOUND)
        return success(document, "Grading system updated successfully")

    # -----------------------------
    # DELETE GRADING SYSTEM
    # -----------------------------
    @grading_bp.route("/<grading_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting grading system")
    def delete_grading(grading_id):
        oid = parse_object_id(grading_id, INVALID_ID)
        delete_document(gradings, oid, NOT_FOUND)
        return success(message="Grading system deleted successfully")

    return grading_bp
