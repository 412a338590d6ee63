import logging

from flask import Blueprint

from models.basic_settings import BasicSettings
from utils.crud import insert_document, update_document
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body

logger = logging.getLogger(__name__)

NOT_FOUND = "Basic settings not found"


def create_basic_settings_blueprint(basic_settings):
    basic_settings_bp = Blueprint("basic_settings", __name__, url_prefix="/api/basic-settings")

    @basic_settings_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching basic settings")
    def get_basic_settings():
        document = basic_settings.find_one()
        if not document:
            # nothing saved yet, answer with the defaults without storing them
            return success(BasicSettings.defaults())
        return success(document)

    @basic_settings_bp.route("", methods=["POST"])
    @handle_storage_errors("Error saving basic settings")
    def save_basic_settings():
        fields = BasicSettings.from_payload(json_body()).to_dict()

        with scoped_lock(basic_settings.name):
            existing = basic_settings.find_one()
            if existing:
                document = update_document(basic_settings, existing["_id"], fields, NOT_FOUND)
                logger.info("%s updated", basic_settings.name)
                return success(document, "Basic settings updated successfully")
            document = insert_document(basic_settings, dict(BasicSettings.defaults(), **fields))
            logger.info("%s created", basic_settings.name)

        return success(document, "Basic settings saved successfully", 201)

    return basic_settings_bp
