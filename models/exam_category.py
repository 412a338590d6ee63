from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, is_blank, parse_bool, parse_number


class ExamCategory:

    FIELDS = ("name", "isMain", "totalMarks", "passMarks", "weight")

    def __init__(self, name, total_marks, pass_marks, weight, is_main=False):
        self.name = name
        self.is_main = is_main
        self.total_marks = total_marks
        self.pass_marks = pass_marks
        self.weight = weight

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        for field in ("name", "totalMarks", "passMarks", "weight"):
            if is_blank(payload.get(field)):
                raise ValidationError("All fields are required")

        return cls(
            name=clean_string(payload["name"]),
            total_marks=parse_number(payload["totalMarks"], "Total marks must be a number"),
            pass_marks=parse_number(payload["passMarks"], "Pass marks must be a number"),
            weight=parse_number(payload["weight"], "Weight must be a number"),
            is_main=parse_bool(payload.get("isMain")),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "isMain": self.is_main,
            "totalMarks": self.total_marks,
            "passMarks": self.pass_marks,
            "weight": self.weight,
        }
