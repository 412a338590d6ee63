from utils.errors import ValidationError
from utils.validation import (
    accepted_fields, clean_string, parse_bool, parse_int, parse_optional_object_id,
)


class AttendanceShift:
    """A named entry/exit schedule for students or teachers."""

    FIELDS = (
        "shiftName", "class", "section", "studentEntryTime", "studentExitTime",
        "teacherEntryTime", "teacherExitTime", "countLateAfter", "countEarlyExitBefore",
        "timezone", "sendSms", "smsType", "absentAfter", "instituteShortName",
        "enableAbsentSms", "sendSmsTo",
    )
    TIME_FIELDS = ("studentEntryTime", "studentExitTime", "teacherEntryTime", "teacherExitTime")

    def __init__(self, shift_name, class_id=None, section_id=None, times=None,
                 count_late_after=0, count_early_exit_before=0, timezone="Asia/Dhaka",
                 send_sms=False, sms_type=None, absent_after=None,
                 institute_short_name="", enable_absent_sms=False, send_sms_to="to_institute"):
        self.shift_name = shift_name
        self.class_id = class_id
        self.section_id = section_id
        # studentEntryTime, studentExitTime, teacherEntryTime, teacherExitTime
        self.times = {key: (times or {}).get(key, "") for key in self.TIME_FIELDS}
        self.count_late_after = count_late_after
        self.count_early_exit_before = count_early_exit_before
        self.timezone = timezone
        self.send_sms = send_sms
        self.sms_type = sms_type if send_sms else None
        self.absent_after = absent_after
        self.institute_short_name = institute_short_name
        self.enable_absent_sms = enable_absent_sms
        self.send_sms_to = send_sms_to

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)

        shift_name = clean_string(payload.get("shiftName"))
        if not shift_name:
            raise ValidationError("Shift name is required")

        times = {key: clean_string(payload.get(key)) for key in cls.TIME_FIELDS}
        # Teacher shifts have no class, so only one of the entry times is needed
        if not times["teacherEntryTime"] and not times["studentEntryTime"]:
            raise ValidationError("Either student or teacher entry time is required")

        send_sms = parse_bool(payload.get("sendSms"))
        sms_type = clean_string(payload.get("smsType")) or None
        if send_sms and not sms_type:
            raise ValidationError("SMS type is required when SMS is enabled")

        return cls(
            shift_name=shift_name,
            class_id=parse_optional_object_id(payload.get("class"), "Invalid class ID"),
            section_id=parse_optional_object_id(payload.get("section"), "Invalid section ID"),
            times=times,
            count_late_after=parse_int(payload.get("countLateAfter"), "countLateAfter must be a number", default=0),
            count_early_exit_before=parse_int(
                payload.get("countEarlyExitBefore"), "countEarlyExitBefore must be a number", default=0),
            timezone=clean_string(payload.get("timezone")) or "Asia/Dhaka",
            send_sms=send_sms,
            sms_type=sms_type,
            absent_after=clean_string(payload.get("absentAfter")) or None,
            institute_short_name=clean_string(payload.get("instituteShortName")),
            enable_absent_sms=parse_bool(payload.get("enableAbsentSms")),
            send_sms_to=clean_string(payload.get("sendSmsTo")) or "to_institute",
        )

    @classmethod
    def changes_from_payload(cls, payload, current):
        payload = accepted_fields(payload, cls.FIELDS)
        changes = {}

        if "shiftName" in payload:
            shift_name = clean_string(payload["shiftName"])
            if not shift_name:
                raise ValidationError("Shift name is required")
            changes["shiftName"] = shift_name
        for key in ("class", "section"):
            if key in payload:
                changes[key] = parse_optional_object_id(payload[key], f"Invalid {key} ID")
        for key in cls.TIME_FIELDS:
            if key in payload:
                changes[key] = clean_string(payload[key])
        for key in ("countLateAfter", "countEarlyExitBefore"):
            if key in payload:
                changes[key] = parse_int(payload[key], f"{key} must be a number", default=0)
        if "timezone" in payload:
            changes["timezone"] = clean_string(payload["timezone"]) or "Asia/Dhaka"
        if "instituteShortName" in payload:
            changes["instituteShortName"] = clean_string(payload["instituteShortName"])
        if "absentAfter" in payload:
            changes["absentAfter"] = clean_string(payload["absentAfter"]) or None
        if "sendSmsTo" in payload:
            changes["sendSmsTo"] = clean_string(payload["sendSmsTo"]) or "to_institute"
        for key in ("sendSms", "enableAbsentSms"):
            if key in payload:
                changes[key] = parse_bool(payload[key])
        if "smsType" in payload:
            changes["smsType"] = clean_string(payload["smsType"]) or None

        merged = dict(current, **changes)
        if not merged.get("teacherEntryTime") and not merged.get("studentEntryTime"):
            raise ValidationError("Either student or teacher entry time is required")
        if merged.get("sendSms") and not merged.get("smsType"):
            raise ValidationError("SMS type is required when SMS is enabled")
        if not merged.get("sendSms"):
            changes["smsType"] = None
        return changes

    def to_dict(self):
        return {
            "shiftName": self.shift_name,
            "class": self.class_id,
            "section": self.section_id,
            **self.times,
            "countLateAfter": self.count_late_after,
            "countEarlyExitBefore": self.count_early_exit_before,
            "timezone": self.timezone,
            "sendSms": self.send_sms,
            "smsType": self.sms_type,
            "absentAfter": self.absent_after,
            "instituteShortName": self.institute_short_name,
            "enableAbsentSms": self.enable_absent_sms,
            "sendSmsTo": self.send_sms_to,
        }
