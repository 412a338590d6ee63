import logging

from flask import Blueprint, request

from models.advance_fee import AdvanceFee
from utils.crud import (
    build_filters, delete_document, find_duplicate, get_or_404,
    insert_document, newest_first, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid advance fee ID"
NOT_FOUND = "Advance fee not found"
DUPLICATE = "Advance fee already exists for this class, batch, section and session"


def create_advance_fee_blueprint(advance_fees):
    advance_fee_bp = Blueprint("advance_fees", __name__, url_prefix="/api/advance-fees")

    def scope_lock(scope):
        return scoped_lock(advance_fees.name, *(scope[field] for field in AdvanceFee.SCOPE_FIELDS))

    # -----------------------------
    # VIEW ADVANCE FEES
    # -----------------------------
    @advance_fee_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching advance fees")
    def list_advance_fees():
        query = build_filters(request.args, fields=AdvanceFee.SCOPE_FIELDS + ("status",))
        return success(newest_first(advance_fees, query))

    @advance_fee_bp.route("/<fee_id>", methods=["GET"])
    @handle_storage_errors("Error fetching advance fee")
    def get_advance_fee(fee_id):
        oid = parse_object_id(fee_id, INVALID_ID)
        return success(get_or_404(advance_fees, oid, NOT_FOUND))

    # -----------------------------
    # ADD ADVANCE FEE
    # -----------------------------
    @advance_fee_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating advance fee")
    def create_advance_fee():
        fee = AdvanceFee.from_payload(json_body())
        scope = fee.scope()

        with scope_lock(scope):
            if find_duplicate(advance_fees, scope):
                raise DuplicateError(DUPLICATE)
            document = insert_document(advance_fees, fee.to_dict())

        logger.info("Advance fee created for class %s", fee.class_id)
        return success(document, "Advance fee created successfully", 201)

    # -----------------------------
    # EDIT / UPDATE ADVANCE FEE
    # -----------------------------
    @advance_fee_bp.route("/<fee_id>", methods=["PUT"])
    @handle_storage_errors("Error updating advance fee")
    def update_advance_fee(fee_id):
        oid = parse_object_id(fee_id, INVALID_ID)
        current = get_or_404(advance_fees, oid, NOT_FOUND)
        changes = AdvanceFee.changes_from_payload(json_body())

        scope = {field: changes.get(field, current.get(field)) for field in AdvanceFee.SCOPE_FIELDS}
        with scope_lock(scope):
            if find_duplicate(advance_fees, scope, exclude_id=oid):
                raise DuplicateError(DUPLICATE)
            document = update_document(advance_fees, oid, changes, NOT_FOUND)

        return success(document, "Advance fee updated successfully")

    # -----------------------------
    # DELETE ADVANCE FEE
    # -----------------------------
    @advance_fee_bp.route("/<fee_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting advance fee")
    def delete_advance_fee(fee_id):
        oid = parse_object_id(fee_id, INVALID_ID)
        delete_document(advance_fees, oid, NOT_FOUND)
        return success(message="Advance fee deleted successfully")

    return advance_fee_bp
