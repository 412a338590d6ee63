import logging

from flask import Blueprint

from models.contact_info import ContactInfo
from utils.crud import get_or_404, insert_document, update_document
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid contact info ID"
NOT_FOUND = "Contact info not found"


def create_contact_info_blueprint(contact_info):
    contact_bp = Blueprint("contact_info", __name__, url_prefix="/api/contact-info")

    # -----------------------------
    # VIEW CONTACT INFO
    # -----------------------------
    @contact_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching contact info")
    def get_contact_info():
        return success(contact_info.find_one())

    @contact_bp.route("/<info_id>", methods=["GET"])
    @handle_storage_errors("Error fetching contact info")
    def get_contact_info_by_id(info_id):
        oid = parse_object_id(info_id, INVALID_ID)
        return success(get_or_404(contact_info, oid, NOT_FOUND))

    # -----------------------------
    # SAVE CONTACT INFO
    # -----------------------------
    @contact_bp.route("", methods=["POST"])
    @handle_storage_errors("Error saving contact info")
    def save_contact_info():
        fields = ContactInfo.from_payload(json_body()).to_dict()

        with scoped_lock(contact_info.name):
            existing = contact_info.find_one()
            if existing:
                document = update_document(contact_info, existing["_id"], fields, NOT_FOUND)
                logger.info("%s updated", contact_info.name)
                return success(document, "Contact info updated successfully")
            document = insert_document(contact_info, fields)
            logger.info("%s created", contact_info.name)

        return success(document, "Contact info created successfully", 201)

    @contact_bp.route("/<info_id>", methods=["PUT"])
    @handle_storage_errors("Error updating contact info")
    def update_contact_info(info_id):
        oid = parse_object_id(info_id, INVALID_ID)
        fields = ContactInfo.from_payload(json_body()).to_dict()
        document = update_document(contact_info, oid, fields, NOT_FOUND)
        return success(document, "Contact info updated successfully")

    return contact_bp
