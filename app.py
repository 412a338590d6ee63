import logging

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException

from config import Config
from utils.crud import utcnow
from utils.db import get_collections, init_db_connection
from utils.errors import ApiError
from utils.responses import MongoJSONProvider, failure

# Import controllers
from controllers.attendance_settings_controller import create_attendance_settings_blueprint
from controllers.attendance_shift_controller import create_attendance_shift_blueprint
from controllers.admission_info_controller import create_admission_info_blueprint
from controllers.contact_info_controller import create_contact_info_blueprint
from controllers.basic_settings_controller import create_basic_settings_blueprint
from controllers.exam_category_controller import create_exam_category_blueprint
from controllers.grading_controller import create_grading_blueprint
from controllers.advance_fee_controller import create_advance_fee_blueprint
from controllers.expense_category_controller import create_expense_category_blueprint
from controllers.expense_item_controller import create_expense_item_blueprint
from controllers.named_entry_controller import create_menu_blueprint, create_playlist_blueprint
from controllers.blog_category_controller import create_blog_category_blueprint
from controllers.seat_plan_controller import create_seat_plan_blueprint
from controllers.exam_timetable_controller import create_exam_timetable_blueprint
from controllers.section_controller import create_section_blueprint
from controllers.teacher_lesson_controller import create_teacher_lesson_blueprint

logger = logging.getLogger(__name__)


def create_app(config_object=Config, db=None):
    """
    Build the Flask app. Pass `db` to run against an existing database
    handle (tests); otherwise MongoDB is reached through Flask-PyMongo.
    """
    app = Flask(__name__)               # Initialize Flask app
    app.config.from_object(config_object)
    app.json = MongoJSONProvider(app)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if db is None:
        db = init_db_connection(app)    # Initialize MongoDB connection
    c = get_collections(db, app.config["COLLECTIONS"])

    # Register Blueprints
    app.register_blueprint(create_attendance_settings_blueprint(c["attendance_settings"]))
    app.register_blueprint(create_attendance_shift_blueprint(
        c["attendance_shifts"], c["classes"], c["sections"]))
    app.register_blueprint(create_admission_info_blueprint(c["admission_info"]))
    app.register_blueprint(create_contact_info_blueprint(c["contact_info"]))
    app.register_blueprint(create_basic_settings_blueprint(c["basic_settings"]))

    app.register_blueprint(create_exam_category_blueprint(c["exam_categories"]))
    app.register_blueprint(create_grading_blueprint(c["grading"]))
    app.register_blueprint(create_seat_plan_blueprint(c["seat_plans"]))
    app.register_blueprint(create_exam_timetable_blueprint(c["exam_timetables"]))

    app.register_blueprint(create_advance_fee_blueprint(c["advance_fees"]))
    app.register_blueprint(create_expense_category_blueprint(c["expense_categories"]))
    app.register_blueprint(create_expense_item_blueprint(
        c["expense_items"], c["expense_categories"]))

    app.register_blueprint(create_menu_blueprint(c["menus"]))
    app.register_blueprint(create_playlist_blueprint(c["playlists"]))
    app.register_blueprint(create_blog_category_blueprint(c["blog_categories"]))

    app.register_blueprint(create_section_blueprint(c["sections"], c["classes"]))
    app.register_blueprint(create_teacher_lesson_blueprint(
        c["teacher_lessons"], c["teachers"], c["classes"]))

    register_core_routes(app)
    register_error_handlers(app)
    return app


def register_core_routes(app):

    @app.route("/health")
    def health():
        return jsonify({
            "status": "OK",
            "message": "Server is running smoothly",
            "timestamp": utcnow().isoformat(),
        })

    # Uploaded files are served read-only
    @app.route("/uploads/<path:filename>")
    def uploaded_file(filename):
        return send_from_directory(app.config["UPLOAD_ROOT"], filename)


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return failure(e.message, e.status_code, error=e.error)

    @app.errorhandler(404)
    def handle_not_found(e):
        return failure("Route not found", 404, path=request.path)

    @app.errorhandler(413)
    def handle_too_large(e):
        limit = app.config["LESSON_MAX_BYTES"] // (1024 * 1024)
        return failure(f"File too large. Maximum size is {limit}MB.", 413)

    @app.errorhandler(405)
    def handle_method_not_allowed(e):
        return failure("Method not allowed", 405, path=request.path)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return failure(e.description, e.code)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return failure(
            "Internal server error",
            500,
            error=str(e) if app.debug else "Something went wrong",
        )


# Run the app
if __name__ == "__main__":
    create_app().run(debug=Config.DEBUG)
