import logging

from flask import Blueprint

from models.admission_info import AdmissionInfo
from utils.crud import insert_document, update_document
from utils.errors import NotFoundError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body

logger = logging.getLogger(__name__)

NOT_FOUND = "Admission info not found"


def create_admission_info_blueprint(admission_info):
    admission_bp = Blueprint("admission_info", __name__, url_prefix="/api/admission-info")

    @admission_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching admission info")
    def get_admission_info():
        return success(admission_info.find_one())

    @admission_bp.route("", methods=["POST"])
    @handle_storage_errors("Error saving admission info")
    def save_admission_info():
        fields = AdmissionInfo.from_payload(json_body()).to_dict()

        with scoped_lock(admission_info.name):
            existing = admission_info.find_one()
            if existing:
                document = update_document(admission_info, existing["_id"], fields, NOT_FOUND)
                logger.info("%s updated", admission_info.name)
                return success(document, "Admission info updated successfully")
            document = insert_document(admission_info, fields)
            logger.info("%s created", admission_info.name)

        return success(document, "Admission info created successfully", 201)

    @admission_bp.route("", methods=["DELETE"])
    @handle_storage_errors("Error deleting admission info")
    def delete_admission_info():
        with scoped_lock(admission_info.name):
            existing = admission_info.find_one()
            if not existing:
                raise NotFoundError(NOT_FOUND)
            admission_info.delete_one({"_id": existing["_id"]})
        return success(message="Admission info deleted successfully")

    return admission_bp
