from flask import Blueprint

from models.expense import ExpenseCategory
from utils.crud import (
    delete_document, find_duplicate, get_or_404, insert_document,
    name_pattern, newest_first, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

INVALID_ID = "Invalid expense category ID"
NOT_FOUND = "Expense category not found"
DUPLICATE = "Expense category already exists"


def create_expense_category_blueprint(expense_categories):
    expense_category_bp = Blueprint("expense_categories", __name__, url_prefix="/api/expense-category")

    @expense_category_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching expense categories")
    def list_categories():
        categories = newest_first(expense_categories)
        return success(categories, total=len(categories))

    @expense_category_bp.route("/<category_id>", methods=["GET"])
    @handle_storage_errors("Error fetching expense category")
    def get_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        return success(get_or_404(expense_categories, oid, NOT_FOUND))

    @expense_category_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating expense category")
    def create_category():
        category = ExpenseCategory.from_payload(json_body())

        with scoped_lock(expense_categories.name, category.name.lower()):
            if find_duplicate(expense_categories, {"name": name_pattern(category.name)}):
                raise DuplicateError(DUPLICATE)
            document = insert_document(expense_categories, category.to_dict())

        return success(document, "Expense category created successfully", 201)

    @expense_category_bp.route("/<category_id>", methods=["PUT"])
    @handle_storage_errors("Error updating expense category")
    def update_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        changes = ExpenseCategory.changes_from_payload(json_body())
        get_or_404(expense_categories, oid, NOT_FOUND)

        if "name" not in changes:
            return success(update_document(expense_categories, oid, changes, NOT_FOUND),
                           "Expense category updated successfully")

        with scoped_lock(expense_categories.name, changes["name"].lower()):
            if find_duplicate(expense_categories, {"name": name_pattern(changes["name"])}, exclude_id=oid):
                raise DuplicateError(DUPLICATE)
            document = update_document(expense_categories, oid, changes, NOT_FOUND)

        return success(document, "Expense category updated successfully")

    # -----------------------------
    # TOGGLE ACTIVE / INACTIVE
    # -----------------------------
    @expense_category_bp.route("/<category_id>/toggle-status", methods=["PATCH"])
    @handle_storage_errors("Error toggling expense category status")
    def toggle_status(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        category = get_or_404(expense_categories, oid, NOT_FOUND)
        is_active = not category.get("isActive", True)
        document = update_document(expense_categories, oid, {"isActive": is_active}, NOT_FOUND)
        state = "activated" if is_active else "deactivated"
        return success(document, f"Expense category {state} successfully")

    @expense_category_bp.route("/<category_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting expense category")
    def delete_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        delete_document(expense_categories, oid, NOT_FOUND)
        return success(message="Expense category deleted successfully")

    return expense_category_bp
