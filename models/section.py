from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, is_blank, parse_bool, parse_object_id


class Section:

    FIELDS = ("name", "classId", "isActive")

    def __init__(self, name, class_id, is_active=True):
        self.name = name
        self.class_id = class_id
        self.is_active = is_active

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        name = clean_string(payload.get("name"))
        if not name or is_blank(payload.get("classId")):
            raise ValidationError("Section name and class are required")
        return cls(
            name=name,
            class_id=parse_object_id(payload["classId"], "Invalid class ID"),
            is_active=parse_bool(payload.get("isActive"), default=True),
        )

    def to_dict(self):
        return {"name": self.name, "classId": self.class_id, "isActive": self.is_active}
