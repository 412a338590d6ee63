import logging

from flask import Blueprint

from models.expense import ExpenseItem
from utils.crud import (
    delete_document, left_join, shape_joined, update_document, utcnow,
)
from utils.errors import NotFoundError
from utils.guards import handle_storage_errors
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid expense item ID"
NOT_FOUND = "Expense item not found"


def create_expense_item_blueprint(expense_items, expense_categories):
    expense_item_bp = Blueprint("expense_items", __name__, url_prefix="/api/expense-items")

    def joined(match=None):
        pipeline = [{"$match": match}] if match else []
        pipeline += left_join(expense_categories.name, "category", "category")
        pipeline.append({"$sort": {"createdAt": -1}})
        return shape_joined(list(expense_items.aggregate(pipeline)), "category")

    # -----------------------------
    # VIEW EXPENSE ITEMS (with category)
    # -----------------------------
    @expense_item_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching expense items")
    def list_items():
        return success(joined())

    @expense_item_bp.route("/<item_id>", methods=["GET"])
    @handle_storage_errors("Error fetching expense item")
    def get_item(item_id):
        oid = parse_object_id(item_id, INVALID_ID)
        documents = joined({"_id": oid})
        if not documents:
            raise NotFoundError(NOT_FOUND)
        return success(documents[0])

    # -----------------------------
    # ADD EXPENSE ITEMS (bulk)
    # -----------------------------
    @expense_item_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating expense items")
    def create_items():
        items = ExpenseItem.many_from_payload(json_body())

        now = utcnow()
        documents = [dict(item.to_dict(), createdAt=now, updatedAt=now) for item in items]
        # ordered: stops at the first failure, earlier items stay written
        result = expense_items.insert_many(documents, ordered=True)
        for document, inserted_id in zip(documents, result.inserted_ids):
            document["_id"] = inserted_id

        logger.info("Created %d expense items", len(documents))
        return success(documents, f"{len(documents)} expense items created successfully", 201)

    @expense_item_bp.route("/<item_id>", methods=["PUT"])
    @handle_storage_errors("Error updating expense item")
    def update_item(item_id):
        oid = parse_object_id(item_id, INVALID_ID)
        item = ExpenseItem.from_payload(json_body())
        document = update_document(expense_items, oid, item.to_dict(), NOT_FOUND)
        return success(document, "Expense item updated successfully")

    @expense_item_bp.route("/<item_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting expense item")
    def delete_item(item_id):
        oid = parse_object_id(item_id, INVALID_ID)
        delete_document(expense_items, oid, NOT_FOUND)
        return success(message="Expense item deleted successfully")

    return expense_item_bp
