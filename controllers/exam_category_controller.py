from flask import Blueprint

from models.exam_category import ExamCategory
from utils.crud import (
    delete_document, find_duplicate, get_or_404, insert_document,
    name_pattern, newest_first, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

INVALID_ID = "Invalid category ID"
NOT_FOUND = "Exam category not found"
DUPLICATE = "Exam category name already exists"


def create_exam_category_blueprint(exam_categories):
    exam_category_bp = Blueprint("exam_categories", __name__, url_prefix="/api/exam-categories")

    @exam_category_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching exam categories")
    def list_categories():
        return success(newest_first(exam_categories), "Exam categories fetched successfully")

    @exam_category_bp.route("/<category_id>", methods=["GET"])
    @handle_storage_errors("Error fetching exam category")
    def get_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        category = get_or_404(exam_categories, oid, NOT_FOUND)
        return success(category, "Exam category fetched successfully")

    @exam_category_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating exam category")
    def create_category():
        category = ExamCategory.from_payload(json_body())

        with scoped_lock(exam_categories.name, category.name.lower()):
            if find_duplicate(exam_categories, {"name": name_pattern(category.name)}):
                raise DuplicateError(DUPLICATE)
            document = insert_document(exam_categories, category.to_dict())

        return success(document, "Exam category created successfully", 201)

    @exam_category_bp.route("/<category_id>", methods=["PUT"])
    @handle_storage_errors("Error updating exam category")
    def update_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        category = ExamCategory.from_payload(json_body())

        with scoped_lock(exam_categories.name, category.name.lower()):
            if find_duplicate(exam_categories, {"name": name_pattern(category.name)}, exclude_id=oid):
                raise DuplicateError(DUPLICATE)
            document = update_document(exam_categories, oid, category.to_dict(), NOT_FOUND)

        return success(document, "Exam category updated successfully")

    @exam_category_bp.route("/<category_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting exam category")
    def delete_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        delete_document(exam_categories, oid, NOT_FOUND)
        return success(message="Exam category deleted successfully")

    return exam_category_bp
