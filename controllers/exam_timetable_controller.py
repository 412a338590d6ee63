import logging

from flask import Blueprint

from models.exam_timetable import ExamTimetable
from utils.crud import delete_document, get_or_404, insert_document, newest_first, update_document
from utils.guards import handle_storage_errors
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "অবৈধ রুটিন আইডি"
NOT_FOUND = "পরীক্ষার রুটিন পাওয়া যায়নি"


def create_exam_timetable_blueprint(timetables):
    timetable_bp = Blueprint("exam_timetables", __name__, url_prefix="/api/exam-timetable")

    @timetable_bp.route("", methods=["GET"])
    @handle_storage_errors("পরীক্ষার রুটিন লোড করতে সমস্যা হয়েছে")
    def list_timetables():
        return success(newest_first(timetables))

    @timetable_bp.route("/<timetable_id>", methods=["GET"])
    @handle_storage_errors("পরীক্ষার রুটিন লোড করতে সমস্যা হয়েছে")
    def get_timetable(timetable_id):
        oid = parse_object_id(timetable_id, INVALID_ID)
        return success(get_or_404(timetables, oid, NOT_FOUND))

    @timetable_bp.route("", methods=["POST"])
    @handle_storage_errors("পরীক্ষার রুটিন তৈরি করতে সমস্যা হয়েছে")
    def create_timetable():
        timetable = ExamTimetable.from_payload(json_body())
        document = insert_document(timetables, timetable.to_dict())
        return success(document, "পরীক্ষার রুটিন সফলভাবে তৈরি হয়েছে", 201)

    @timetable_bp.route("/<timetable_id>", methods=["PUT"])
    @handle_storage_errors("পরীক্ষার রুটিন আপডেট করতে সমস্যা হয়েছে")
    def update_timetable(timetable_id):
        oid = parse_object_id(timetable_id, INVALID_ID)
        timetable = ExamTimetable.from_payload(json_body())
        document = update_document(timetables, oid, timetable.to_dict(), NOT_FOUND)
        return success(document, "পরীক্ষার রুটিন সফলভাবে আপডেট হয়েছে")

    # -----------------------------
    # TOGGLE STATUS
    # -----------------------------
    @timetable_bp.route("/<timetable_id>/toggle-status", methods=["PATCH"])
    @handle_storage_errors("স্ট্যাটাস পরিবর্তন করতে সমস্যা হয়েছে")
    def toggle_status(timetable_id):
        oid = parse_object_id(timetable_id, INVALID_ID)
        timetable = get_or_404(timetables, oid, NOT_FOUND)
        status = ExamTimetable.toggled(timetable.get("status"))
        update_document(timetables, oid, {"status": status}, NOT_FOUND)
        logger.info("Exam timetable %s is now %s", timetable_id, status)
        return success({"status": status}, "স্ট্যাটাস সফলভাবে পরিবর্তন হয়েছে")

    @timetable_bp.route("/<timetable_id>", methods=["DELETE"])
    @handle_storage_errors("পরীক্ষার রুটিন ডিলিট করতে সমস্যা হয়েছে")
    def delete_timetable(timetable_id):
        oid = parse_object_id(timetable_id, INVALID_ID)
        delete_document(timetables, oid, NOT_FOUND)
        return success(message="পরীক্ষার রুটিন সফলভাবে ডিলিট হয়েছে")

    return timetable_bp
