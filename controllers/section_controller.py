from flask import Blueprint

from models.section import Section
from utils.crud import (
    delete_document, find_duplicate, get_or_404, insert_document,
    left_join, name_pattern, shape_joined, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

INVALID_ID = "Invalid section ID"
NOT_FOUND = "Section not found"
DUPLICATE = "Section already exists for this class"


def create_section_blueprint(sections, classes):
    section_bp = Blueprint("sections", __name__, url_prefix="/api/sections")

    def check_unique(section, exclude_id=None):
        query = {"name": name_pattern(section.name), "classId": section.class_id}
        if find_duplicate(sections, query, exclude_id=exclude_id):
            raise DuplicateError(DUPLICATE)

    # -----------------------------
    # VIEW SECTIONS (with class)
    # -----------------------------
    @section_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching sections")
    def list_sections():
        pipeline = left_join(classes.name, "classId", "class") + [{"$sort": {"createdAt": -1}}]
        documents = list(sections.aggregate(pipeline))
        return success(shape_joined(documents, "class", fields=("name",)))

    # -----------------------------
    # VIEW ACTIVE SECTIONS OF A CLASS
    # -----------------------------
    @section_bp.route("/class/<class_id>", methods=["GET"])
    @handle_storage_errors("Error fetching sections")
    def list_class_sections(class_id):
        class_oid = parse_object_id(class_id, "Invalid class ID")
        documents = list(sections.find({"classId": class_oid, "isActive": True}).sort("name", 1))
        return success(documents)

    @section_bp.route("/<section_id>", methods=["GET"])
    @handle_storage_errors("Error fetching section")
    def get_section(section_id):
        oid = parse_object_id(section_id, INVALID_ID)
        return success(get_or_404(sections, oid, NOT_FOUND))

    # -----------------------------
    # ADD SECTION
    # -----------------------------
    @section_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating section")
    def create_section():
        section = Section.from_payload(json_body())

        with scoped_lock(sections.name, str(section.class_id), section.name.lower()):
            check_unique(section)
            document = insert_document(sections, section.to_dict())

        return success(document, "Section created successfully", 201)

    # -----------------------------
    # EDIT / UPDATE SECTION
    # -----------------------------
    @section_bp.route("/<section_id>", methods=["PUT"])
    @handle_storage_errors("Error updating section")
    def update_section(section_id):
        oid = parse_object_id(section_id, INVALID_ID)
        section = Section.from_payload(json_body())

        with scoped_lock(sections.name, str(section.class_id), section.name.lower()):
            check_unique(section, exclude_id=oid)
            document = update_document(sections, oid, section.to_dict(), NOT_FOUND)

        return success(document, "Section updated successfully")

    # -----------------------------
    # DELETE SECTION
    # -----------------------------
    @section_bp.route("/<section_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting section")
    def delete_section(section_id):
        oid = parse_object_id(section_id, INVALID_ID)
        delete_document(sections, oid, NOT_FOUND)
        return success(message="Section deleted successfully")

    return section_bp
