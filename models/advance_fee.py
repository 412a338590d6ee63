from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, is_blank, parse_bool, parse_number

MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
STATUSES = ("active", "inactive")


class AdvanceFee:
    """Monthly fee collected in advance for one class/batch/section/session."""

    SCOPE_FIELDS = ("classId", "batchId", "sectionId", "sessionId")
    FIELDS = SCOPE_FIELDS + ("monthlyFee", "sendAttendanceSMS", "generateFeesTo", "status")

    def __init__(self, class_id, batch_id, section_id, session_id, monthly_fee,
                 send_attendance_sms=False, generate_fees_to="january", status="active"):
        self.class_id = class_id
        self.batch_id = batch_id
        self.section_id = section_id
        self.session_id = session_id
        self.monthly_fee = monthly_fee
        self.send_attendance_sms = send_attendance_sms
        self.generate_fees_to = generate_fees_to
        self.status = status

    @staticmethod
    def _month(value):
        month = clean_string(value).lower() or "january"
        if month not in MONTHS:
            raise ValidationError("generateFeesTo must be a month name")
        return month

    @staticmethod
    def _status(value):
        status = clean_string(value).lower() or "active"
        if status not in STATUSES:
            raise ValidationError("Status must be active or inactive")
        return status

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        for field in cls.SCOPE_FIELDS + ("monthlyFee",):
            if is_blank(payload.get(field)):
                raise ValidationError("All required fields must be provided")

        return cls(
            class_id=clean_string(payload["classId"]),
            batch_id=clean_string(payload["batchId"]),
            section_id=clean_string(payload["sectionId"]),
            session_id=clean_string(payload["sessionId"]),
            monthly_fee=parse_number(payload["monthlyFee"], "Monthly fee must be a number"),
            send_attendance_sms=parse_bool(payload.get("sendAttendanceSMS")),
            generate_fees_to=cls._month(payload.get("generateFeesTo")),
            status=cls._status(payload.get("status")),
        )

    @classmethod
    def changes_from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        changes = {}
        for field in cls.SCOPE_FIELDS:
            if field in payload:
                if is_blank(payload[field]):
                    raise ValidationError("All required fields must be provided")
                changes[field] = clean_string(payload[field])
        if "monthlyFee" in payload:
            changes["monthlyFee"] = parse_number(payload["monthlyFee"], "Monthly fee must be a number")
        if "sendAttendanceSMS" in payload:
            changes["sendAttendanceSMS"] = parse_bool(payload["sendAttendanceSMS"])
        if "generateFeesTo" in payload:
            changes["generateFeesTo"] = cls._month(payload["generateFeesTo"])
        if "status" in payload:
            changes["status"] = cls._status(payload["status"])
        return changes

    def scope(self):
        return {
            "classId": self.class_id,
            "batchId": self.batch_id,
            "sectionId": self.section_id,
            "sessionId": self.session_id,
        }

    def to_dict(self):
        return {
            **self.scope(),
            "monthlyFee": self.monthly_fee,
            "sendAttendanceSMS": self.send_attendance_sms,
            "generateFeesTo": self.generate_fees_to,
            "status": self.status,
        }
