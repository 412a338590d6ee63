from flask import Blueprint

from models.seat_plan import SeatPlan
from utils.crud import delete_document, get_or_404, insert_document, newest_first, update_document
from utils.guards import handle_storage_errors
from utils.responses import success
from utils.validation import json_body, parse_object_id

INVALID_ID = "অবৈধ সিট প্ল্যান আইডি"
NOT_FOUND = "সিট প্ল্যান পাওয়া যায়নি"


def create_seat_plan_blueprint(seat_plans):
    seat_plan_bp = Blueprint("seat_plans", __name__, url_prefix="/api/seat-arrangement")

    # -----------------------------
    # VIEW SEAT PLANS
    # -----------------------------
    @seat_plan_bp.route("", methods=["GET"])
    @handle_storage_errors("সিট প্ল্যান লোড করতে সমস্যা হয়েছে")
    def list_seat_plans():
        return success(newest_first(seat_plans))

    @seat_plan_bp.route("/<plan_id>", methods=["GET"])
    @handle_storage_errors("সিট প্ল্যান লোড করতে সমস্যা হয়েছে")
    def get_seat_plan(plan_id):
        oid = parse_object_id(plan_id, INVALID_ID)
        return success(get_or_404(seat_plans, oid, NOT_FOUND))

    # -----------------------------
    # ADD SEAT PLAN
    # -----------------------------
    @seat_plan_bp.route("", methods=["POST"])
    @handle_storage_errors("সিট প্ল্যান তৈরি করতে সমস্যা হয়েছে")
    def create_seat_plan():
        plan = SeatPlan.from_payload(json_body())
        document = insert_document(seat_plans, plan.to_dict())
        return success(document, "সিট প্ল্যান সফলভাবে তৈরি হয়েছে", 201)

    # -----------------------------
    # EDIT / UPDATE SEAT PLAN
    # -----------------------------
    @seat_plan_bp.route("/<plan_id>", methods=["PUT"])
    @handle_storage_errors("সিট প্ল্যান আপডেট করতে সমস্যা হয়েছে")
    def update_seat_plan(plan_id):
        oid = parse_object_id(plan_id, INVALID_ID)
        plan = SeatPlan.from_payload(json_body())
        document = update_document(seat_plans, oid, plan.to_dict(), NOT_FOUND)
        return success(document, "সিট প্ল্যান সফলভাবে আপডেট হয়েছে")

    # -----------------------------
    # DELETE SEAT PLAN
    # -----------------------------
    @seat_plan_bp.route("/<plan_id>", methods=["DELETE"])
    @handle_storage_errors("সিট প্ল্যান ডিলিট করতে সমস্যা হয়েছে")
    def delete_seat_plan(plan_id):
        oid = parse_object_id(plan_id, INVALID_ID)
        delete_document(seat_plans, oid, NOT_FOUND)
        return success(message="সিট প্ল্যান সফলভাবে ডিলিট হয়েছে")

    return seat_plan_bp
