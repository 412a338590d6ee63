"""
controllers/teacher_lesson_controller.py
----------------------------------------
Lesson plans uploaded by teachers. Files go to <UPLOAD_ROOT>/teacher-lessons/
and are served back through /uploads/teacher-lessons/<name>.
"""

import logging
import os

from flask import Blueprint, current_app, request

from models.teacher_lesson import TeacherLesson
from utils.crud import build_filters, get_or_404, insert_document, left_join, shape_joined, utcnow
from utils.errors import NotFoundError, ValidationError
from utils.guards import handle_storage_errors
from utils.responses import success
from utils.uploads import remove_file, save_upload
from utils.validation import parse_object_id

logger = logging.getLogger(__name__)

SUBFOLDER = "teacher-lessons"
FILE_FIELD = "lessonFile"
INVALID_ID = "Invalid lesson plan ID"
NOT_FOUND = "Lesson plan not found"


def _uploaded_file():
    file = request.files.get(FILE_FIELD)
    if file is None or not file.filename:
        return None
    return file


def _store(file):
    config = current_app.config
    return save_upload(
        file,
        config["UPLOAD_ROOT"],
        SUBFOLDER,
        FILE_FIELD,
        config["LESSON_ALLOWED_EXTENSIONS"],
        config["LESSON_MAX_BYTES"],
    )


def _disk_path(public_path):
    return os.path.join(current_app.config["UPLOAD_ROOT"], SUBFOLDER, os.path.basename(public_path or ""))


def create_teacher_lesson_blueprint(lessons, teachers, classes):
    lesson_bp = Blueprint("teacher_lessons", __name__, url_prefix="/api/teacher-lessons")

    def joined(query):
        pipeline = (
            [{"$match": query}]
            + left_join(teachers.name, "teacherId", "teacher")
            + left_join(classes.name, "classId", "class")
            + [{"$sort": {"createdAt": -1}}]
        )
        documents = list(lessons.aggregate(pipeline))
        shape_joined(documents, "teacher", fields=("name",))
        return shape_joined(documents, "class", fields=("name",))

    # -----------------------------
    # VIEW LESSON PLANS
    # -----------------------------
    @lesson_bp.route("", methods=["GET"])
    @handle_storage_errors("Error fetching teacher lessons")
    def list_lessons():
        query = build_filters(request.args, id_fields=("teacherId", "classId"), date_field="createdAt")
        return success(joined(query), "Teacher lessons fetched successfully")

    @lesson_bp.route("/<lesson_id>", methods=["GET"])
    @handle_storage_errors("Error fetching lesson plan")
    def get_lesson(lesson_id):
        oid = parse_object_id(lesson_id, INVALID_ID)
        documents = joined({"_id": oid})
        if not documents:
            raise NotFoundError(NOT_FOUND)
        return success(documents[0], "Lesson plan fetched successfully")

    # -----------------------------
    # UPLOAD LESSON PLAN
    # -----------------------------
    @lesson_bp.route("", methods=["POST"])
    @handle_storage_errors("Error creating lesson plan")
    def create_lesson():
        lesson = TeacherLesson.from_form(request.form)
        file = _uploaded_file()
        if file is None:
            raise ValidationError("Lesson plan file is required")

        stored = _store(file)
        fields = dict(lesson.to_dict(), **TeacherLesson.file_fields(stored), downloads=0, isActive=True)
        try:
            document = insert_document(lessons, fields)
        except Exception:
            stored.remove()
            raise

        logger.info("Lesson plan uploaded: %s (%d bytes)", stored.stored_name, stored.size)
        return success(document, "Lesson plan created successfully", 201)

    # -----------------------------
    # EDIT / UPDATE LESSON PLAN
    # -----------------------------
    @lesson_bp.route("/<lesson_id>", methods=["PUT"])
    @handle_storage_errors("Error updating lesson plan")
    def update_lesson(lesson_id):
        oid = parse_object_id(lesson_id, INVALID_ID)
        lesson = TeacherLesson.from_form(request.form)
        current = get_or_404(lessons, oid, NOT_FOUND)

        fields = lesson.to_dict()
        file = _uploaded_file()
        stored = _store(file) if file is not None else None
        if stored is not None:
            fields.update(TeacherLesson.file_fields(stored))

        try:
            result = lessons.update_one({"_id": oid}, {"$set": dict(fields, updatedAt=utcnow())})
        except Exception:
            if stored is not None:
                stored.remove()
            raise
        if result.matched_count == 0:
            if stored is not None:
                stored.remove()
            raise NotFoundError(NOT_FOUND)

        if stored is not None and current.get("filePath"):
            remove_file(_disk_path(current["filePath"]))
        return success(lessons.find_one({"_id": oid}), "Lesson plan updated successfully")

    # -----------------------------
    # DELETE LESSON PLAN
    # -----------------------------
    @lesson_bp.route("/<lesson_id>", methods=["DELETE"])
    @handle_storage_errors("Error deleting lesson plan")
    def delete_lesson(lesson_id):
        oid = parse_object_id(lesson_id, INVALID_ID)
        lesson = lessons.find_one_and_delete({"_id": oid})
        if lesson is None:
            raise NotFoundError(NOT_FOUND)
        if lesson.get("filePath"):
            remove_file(_disk_path(lesson["filePath"]))
        return success(message="Lesson plan deleted successfully")

    # -----------------------------
    # COUNT A DOWNLOAD
    # -----------------------------
    @lesson_bp.route("/<lesson_id>/download", methods=["PATCH"])
    @handle_storage_errors("Error updating download count")
    def count_download(lesson_id):
        oid = parse_object_id(lesson_id, INVALID_ID)
        result = lessons.update_one({"_id": oid}, {"$inc": {"downloads": 1}})
        if result.matched_count == 0:
            raise NotFoundError(NOT_FOUND)
        return success(message="Download count updated")

    return lesson_bp
