from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string


class AdmissionInfo:

    FIELDS = ("content",)

    def __init__(self, content):
        self.content = content

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        content = clean_string(payload.get("content"))
        if not content:
            raise ValidationError("Content is required")
        return cls(content)

    def to_dict(self):
        return {"content": self.content}
