import logging

from flask import Blueprint

from models.named_entry import BlogCategory
from utils.crud import (
    delete_document, find_duplicate, get_or_404, insert_document,
    name_pattern, newest_first, update_document,
)
from utils.errors import DuplicateError
from utils.guards import handle_storage_errors
from utils.locks import scoped_lock
from utils.responses import success
from utils.validation import json_body, parse_object_id

logger = logging.getLogger(__name__)

INVALID_ID = "অবৈধ ক্যাটাগরি আইডি"
NOT_FOUND = "ক্যাটাগরি পাওয়া যায়নি"
DUPLICATE = "এই নামের ক্যাটাগরি ইতিমধ্যে বিদ্যমান"


def create_blog_category_blueprint(blog_categories):
    blog_category_bp = Blueprint("blog_categories", __name__, url_prefix="/api/blog-category")

    # -----------------------------
    # VIEW CATEGORIES
    # -----------------------------
    @blog_category_bp.route("", methods=["GET"])
    @handle_storage_errors("ব্লগ ক্যাটাগরি লোড করতে সমস্যা হয়েছে")
    def list_categories():
        return success(newest_first(blog_categories))

    # -----------------------------
    # COUNT CATEGORIES
    # -----------------------------
    @blog_category_bp.route("/count/total", methods=["GET"])
    @handle_storage_errors("ক্যাটাগরি কাউন্ট করতে সমস্যা হয়েছে")
    def count_categories():
        return success({"total": blog_categories.count_documents({})})

    @blog_category_bp.route("/<category_id>", methods=["GET"])
    @handle_storage_errors("ক্যাটাগরি লোড করতে সমস্যা হয়েছে")
    def get_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        return success(get_or_404(blog_categories, oid, NOT_FOUND))

    # -----------------------------
    # ADD CATEGORY
    # -----------------------------
    @blog_category_bp.route("", methods=["POST"])
    @handle_storage_errors("ব্লগ ক্যাটাগরি তৈরি করতে সমস্যা হয়েছে")
    def create_category():
        category = BlogCategory.from_payload(json_body())

        with scoped_lock(blog_categories.name, category.name.lower()):
            if find_duplicate(blog_categories, {"name": name_pattern(category.name)}):
                raise DuplicateError(DUPLICATE)
            document = insert_document(blog_categories, category.to_dict())

        return success(document, "ব্লগ ক্যাটাগরি সফলভাবে তৈরি হয়েছে", 201)

    # -----------------------------
    # EDIT / UPDATE CATEGORY
    # -----------------------------
    @blog_category_bp.route("/<category_id>", methods=["PUT"])
    @handle_storage_errors("ব্লগ ক্যাটাগরি আপডেট করতে সমস্যা হয়েছে")
    def update_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        category = BlogCategory.from_payload(json_body())

        with scoped_lock(blog_categories.name, category.name.lower()):
            if find_duplicate(blog_categories, {"name": name_pattern(category.name)}, exclude_id=oid):
                raise DuplicateError(DUPLICATE)
            document = update_document(blog_categories, oid, category.to_dict(), NOT_FOUND)

        return success(document, "ব্লগ ক্যাটাগরি সফলভাবে আপডেট হয়েছে")

    # -----------------------------
    # DELETE CATEGORY
    # -----------------------------
    @blog_category_bp.route("/<category_id>", methods=["DELETE"])
    @handle_storage_errors("ব্লগ ক্যাটাগরি ডিলিট করতে সমস্যা হয়েছে")
    def delete_category(category_id):
        oid = parse_object_id(category_id, INVALID_ID)
        delete_document(blog_categories, oid, NOT_FOUND)
        return success(message="ব্লগ ক্যাটাগরি সফলভাবে ডিলিট হয়েছে")

    return blog_category_bp
