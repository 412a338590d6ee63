from utils.errors import ValidationError
from utils.validation import (
    accepted_fields, clean_string, parse_bool, parse_int,
    parse_object_id, parse_optional_object_id,
)


class AttendanceSettings:
    """The single smart-attendance settings document of the institute."""

    FIELDS = (
        "studentEntryTime", "studentExitTime", "countLateAfter", "countEarlyExitBefore",
        "class", "section", "timezone", "sendSms", "smsType", "absentAfter",
        "instituteShortName", "enableAbsentSms",
    )

    def __init__(self, student_entry_time, student_exit_time, class_id, section_id=None,
                 count_late_after=0, count_early_exit_before=0, timezone="Asia/Dhaka",
                 send_sms=False, sms_type=None, absent_after=None,
                 institute_short_name="", enable_absent_sms=False):
        self.student_entry_time = student_entry_time
        self.student_exit_time = student_exit_time
        self.class_id = class_id
        self.section_id = section_id
        self.count_late_after = count_late_after
        self.count_early_exit_before = count_early_exit_before
        self.timezone = timezone
        self.send_sms = send_sms
        self.sms_type = sms_type if send_sms else None
        self.absent_after = absent_after
        self.institute_short_name = institute_short_name
        self.enable_absent_sms = enable_absent_sms

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)

        entry = clean_string(payload.get("studentEntryTime"))
        exit_ = clean_string(payload.get("studentExitTime"))
        if not entry or not exit_:
            raise ValidationError("Student entry time and exit time are required")

        if not clean_string(payload.get("class")):
            raise ValidationError("Class selection is required")

        send_sms = parse_bool(payload.get("sendSms"))
        sms_type = clean_string(payload.get("smsType")) or None
        if send_sms and not sms_type:
            raise ValidationError("SMS type is required when SMS is enabled")

        return cls(
            student_entry_time=entry,
            student_exit_time=exit_,
            class_id=parse_object_id(payload.get("class"), "Invalid class ID"),
            section_id=parse_optional_object_id(payload.get("section"), "Invalid section ID"),
            count_late_after=parse_int(payload.get("countLateAfter"), "countLateAfter must be a number", default=0),
            count_early_exit_before=parse_int(
                payload.get("countEarlyExitBefore"), "countEarlyExitBefore must be a number", default=0),
            timezone=clean_string(payload.get("timezone")) or "Asia/Dhaka",
            send_sms=send_sms,
            sms_type=sms_type,
            absent_after=clean_string(payload.get("absentAfter")) or None,
            institute_short_name=clean_string(payload.get("instituteShortName")),
            enable_absent_sms=parse_bool(payload.get("enableAbsentSms")),
        )

    @classmethod
    def changes_from_payload(cls, payload, current):
        """Partial update: only the keys present in the payload change."""
        payload = accepted_fields(payload, cls.FIELDS)
        changes = {}
        for key in ("studentEntryTime", "studentExitTime"):
            if key in payload:
                value = clean_string(payload[key])
                if not value:
                    raise ValidationError("Student entry time and exit time are required")
                changes[key] = value
        if "class" in payload:
            if not clean_string(payload["class"]):
                raise ValidationError("Class selection is required")
            changes["class"] = parse_object_id(payload["class"], "Invalid class ID")
        if "section" in payload:
            changes["section"] = parse_optional_object_id(payload["section"], "Invalid section ID")
        for key in ("countLateAfter", "countEarlyExitBefore"):
            if key in payload:
                changes[key] = parse_int(payload[key], f"{key} must be a number", default=0)
        if "timezone" in payload:
            changes["timezone"] = clean_string(payload["timezone"]) or "Asia/Dhaka"
        if "instituteShortName" in payload:
            changes["instituteShortName"] = clean_string(payload["instituteShortName"])
        if "absentAfter" in payload:
            changes["absentAfter"] = clean_string(payload["absentAfter"]) or None
        for key in ("sendSms", "enableAbsentSms"):
            if key in payload:
                changes[key] = parse_bool(payload[key])
        if "smsType" in payload:
            changes["smsType"] = clean_string(payload["smsType"]) or None

        send_sms = changes.get("sendSms", current.get("sendSms", False))
        sms_type = changes.get("smsType", current.get("smsType"))
        if send_sms and not sms_type:
            raise ValidationError("SMS type is required when SMS is enabled")
        if not send_sms:
            changes["smsType"] = None
        return changes

    def to_dict(self):
        return {
            "studentEntryTime": self.student_entry_time,
            "studentExitTime": self.student_exit_time,
            "countLateAfter": self.count_late_after,
            "countEarlyExitBefore": self.count_early_exit_before,
            "class": self.class_id,
            "section": self.section_id,
            "timezone": self.timezone,
            "sendSms": self.send_sms,
            "smsType": self.sms_type,
            "absentAfter": self.absent_after,
            "instituteShortName": self.institute_short_name,
            "enableAbsentSms": self.enable_absent_sms,
        }
