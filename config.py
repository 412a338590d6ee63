import os
import tempfile

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Load .env sitting next to this file (if any) before reading the environment
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/SchoolManagement")
    DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Uploaded lesson files
    UPLOAD_ROOT = os.getenv("UPLOAD_ROOT", os.path.join(BASE_DIR, "uploads"))
    LESSON_MAX_BYTES = 10 * 1024 * 1024
    # larger request bodies are refused with 413 before they are read
    MAX_CONTENT_LENGTH = LESSON_MAX_BYTES + 1024 * 1024
    LESSON_ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt", ".ppt", ".pptx")

    # resource -> MongoDB collection name
    COLLECTIONS = {
        "attendance_settings": "smart-attendance",
        "attendance_shifts": "smart-attendance-shift",
        "admission_info": "admission-info",
        "contact_info": "contact-info",
        "basic_settings": "basic-settings",
        "exam_categories": "exam-category",
        "grading": "grading",
        "advance_fees": "advance-fees",
        "expense_categories": "expense-category",
        "expense_items": "expense-items",
        "menus": "menu",
        "playlists": "playlist",
        "blog_categories": "blog-category",
        "seat_plans": "exam-arrangement",
        "exam_timetables": "exam-timetable",
        "sections": "sections",
        "classes": "classes",
        "teachers": "teachers",
        "teacher_lessons": "teacher-lesson",
    }


class TestingConfig(Config):
    TESTING = True
    MONGO_URI = "mongodb://localhost:27017/SchoolManagementTest"
    LOG_LEVEL = "WARNING"
    UPLOAD_ROOT = os.path.join(tempfile.gettempdir(), "school-admin-test-uploads")
