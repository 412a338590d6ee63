from utils.errors import ValidationError
from utils.validation import (
    MAX_INT64, accepted_fields, clean_string, is_blank, parse_bool, parse_int, parse_number,
)


class SeatPlan:
    """
    Exam hall seat arrangement for one class/batch/section.
    totalSeats = columnNumber * rowNumber * studentsPerBench
    """

    REQUIRED = (
        "className", "batch", "section", "activeSession", "hallRoom", "exam",
        "examDuration", "columnNumber", "rowNumber", "studentsPerBench",
    )
    FIELDS = REQUIRED + ("monthlyFee", "sendAttendanceSMS", "totalSeats")

    def __init__(self, class_name, batch, section, active_session, hall_room, exam,
                 exam_duration, column_number, row_number, students_per_bench,
                 monthly_fee=0, send_attendance_sms=False):
        self.class_name = class_name
        self.batch = batch
        self.section = section
        self.active_session = active_session
        self.hall_room = hall_room
        self.exam = exam
        self.exam_duration = exam_duration
        self.column_number = column_number
        self.row_number = row_number
        self.students_per_bench = students_per_bench
        self.monthly_fee = monthly_fee
        self.send_attendance_sms = send_attendance_sms

    @property
    def total_seats(self):
        return self.column_number * self.row_number * self.students_per_bench

    @classmethod
    def from_payload(cls, payload):
        # totalSeats is derived; a client echoing it back is ignored
        payload = accepted_fields(payload, cls.FIELDS)
        for field in cls.REQUIRED:
            if is_blank(payload.get(field)):
                raise ValidationError(f"{field} আবশ্যক")

        plan = cls(
            class_name=clean_string(payload["className"]),
            batch=clean_string(payload["batch"]),
            section=clean_string(payload["section"]),
            active_session=clean_string(payload["activeSession"]),
            hall_room=clean_string(payload["hallRoom"]),
            exam=clean_string(payload["exam"]),
            exam_duration=clean_string(payload["examDuration"]),
            column_number=parse_int(payload["columnNumber"], "columnNumber অবশ্যই ধনাত্মক সংখ্যা হতে হবে", minimum=1),
            row_number=parse_int(payload["rowNumber"], "rowNumber অবশ্যই ধনাত্মক সংখ্যা হতে হবে", minimum=1),
            students_per_bench=parse_int(
                payload["studentsPerBench"], "studentsPerBench অবশ্যই ধনাত্মক সংখ্যা হতে হবে", minimum=1),
            monthly_fee=parse_number(payload.get("monthlyFee"), "monthlyFee অবশ্যই সংখ্যা হতে হবে", default=0),
            send_attendance_sms=parse_bool(payload.get("sendAttendanceSMS")),
        )
        if plan.total_seats > MAX_INT64:
            raise ValidationError("মোট সিট সংখ্যা অনেক বেশি")
        return plan

    def to_dict(self):
        return {
            "className": self.class_name,
            "batch": self.batch,
            "section": self.section,
            "activeSession": self.active_session,
            "monthlyFee": self.monthly_fee,
            "sendAttendanceSMS": self.send_attendance_sms,
            "hallRoom": self.hall_room,
            "exam": self.exam,
            "examDuration": self.exam_duration,
            "columnNumber": self.column_number,
            "rowNumber": self.row_number,
            "studentsPerBench": self.students_per_bench,
            "totalSeats": self.total_seats,
        }
