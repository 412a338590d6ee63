from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string

ACTIVE = "active"
INACTIVE = "inactive"


class ExamTimetable:

    FIELDS = ("duration", "status")

    def __init__(self, duration, status=ACTIVE):
        self.duration = duration
        self.status = status

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        duration = clean_string(payload.get("duration"))
        if not duration:
            raise ValidationError("সময়কাল আবশ্যক")
        status = clean_string(payload.get("status")).lower()
        if not status:
            raise ValidationError("অবস্থান আবশ্যক")
        if status not in (ACTIVE, INACTIVE):
            raise ValidationError("অবস্থান active অথবা inactive হতে হবে")
        return cls(duration, status)

    @staticmethod
    def toggled(status):
        return INACTIVE if status == ACTIVE else ACTIVE

    def to_dict(self):
        return {"duration": self.duration, "status": self.status}
