from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, is_blank, parse_bool, parse_number


class GradeRange:

    FIELDS = ("letterGrade", "minMarks", "maxMarks", "gradePoint")

    def __init__(self, letter_grade, min_marks, max_marks, grade_point):
        self.letter_grade = letter_grade
        self.min_marks = min_marks
        self.max_marks = max_marks
        self.grade_point = grade_point

    @classmethod
    def from_payload(cls, payload, position):
        if not isinstance(payload, dict):
            raise ValidationError(f"Grade range {position} must be an object")
        payload = accepted_fields(payload, cls.FIELDS)

        letter_grade = clean_string(payload.get("letterGrade"))
        if not letter_grade:
            raise ValidationError(f"Grade range {position}: letter grade is required")
        min_marks = parse_number(payload.get("minMarks"), f"Grade range {position}: min marks must be a number")
        max_marks = parse_number(payload.get("maxMarks"), f"Grade range {position}: max marks must be a number")
        if min_marks > max_marks:
            raise ValidationError(f"Grade range {position}: min marks cannot exceed max marks")
        grade_point = parse_number(payload.get("gradePoint"), f"Grade range {position}: grade point must be a number")
        return cls(letter_grade, min_marks, max_marks, grade_point)

    def to_dict(self):
        return {
            "letterGrade": self.letter_grade,
            "minMarks": self.min_marks,
            "maxMarks": self.max_marks,
            "gradePoint": self.grade_point,
        }


class Grading:
    """A grading system: marks thresholds plus the letter-grade table."""

    FIELDS = ("name", "totalMarks", "passMarks", "optionalSubjectDeduction", "isSpecialGrading", "gradeRanges")

    def __init__(self, name, total_marks, pass_marks, grade_ranges,
                 optional_subject_deduction=0.0, is_special_grading=False):
        self.name = name
        self.total_marks = total_marks
        self.pass_marks = pass_marks
        self.optional_subject_deduction = optional_subject_deduction
        self.is_special_grading = is_special_grading
        self.grade_ranges = grade_ranges

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        for field in ("name", "totalMarks", "passMarks"):
            if is_blank(payload.get(field)):
                raise ValidationError("Name, total marks and pass marks are required")

        ranges = payload.get("gradeRanges")
        if not isinstance(ranges, list) or len(ranges) == 0:
            raise ValidationError("At least one grade range is required")

        return cls(
            name=clean_string(payload["name"]),
            total_marks=parse_number(payload["totalMarks"], "Total marks must be a number"),
            pass_marks=parse_number(payload["passMarks"], "Pass marks must be a number"),
            grade_ranges=[GradeRange.from_payload(r, i + 1) for i, r in enumerate(ranges)],
            optional_subject_deduction=parse_number(
                payload.get("optionalSubjectDeduction"),
                "Optional subject deduction must be a number",
                default=0.0,
            ),
            is_special_grading=parse_bool(payload.get("isSpecialGrading")),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "totalMarks": self.total_marks,
            "passMarks": self.pass_marks,
            "optionalSubjectDeduction": self.optional_subject_deduction,
            "isSpecialGrading": self.is_special_grading,
            "gradeRanges": [r.to_dict() for r in self.grade_ranges],
        }
