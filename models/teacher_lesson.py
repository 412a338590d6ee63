from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, is_blank, parse_object_id


class TeacherLesson:
    """
    A lesson plan uploaded by a teacher for a class. The file itself lives on
    disk; the document keeps its public path, original name and size.
    """

    FIELDS = ("title", "description", "teacherId", "classId")

    def __init__(self, title, teacher_id, class_id, description=""):
        self.title = title
        self.description = description
        self.teacher_id = teacher_id
        self.class_id = class_id

    @classmethod
    def from_form(cls, form):
        form = accepted_fields(form.to_dict(), cls.FIELDS)
        title = clean_string(form.get("title"))
        if not title or is_blank(form.get("teacherId")) or is_blank(form.get("classId")):
            raise ValidationError("Title, teacher, and class are required")
        return cls(
            title=title,
            teacher_id=parse_object_id(form["teacherId"], "Invalid teacher ID"),
            class_id=parse_object_id(form["classId"], "Invalid class ID"),
            description=clean_string(form.get("description")),
        )

    @staticmethod
    def file_fields(stored_file):
        return {
            "fileName": stored_file.original_name,
            "filePath": stored_file.public_path,
            "fileSize": stored_file.size,
        }

    def to_dict(self):
        return {
            "title": self.title,
            "description": self.description,
            "teacherId": self.teacher_id,
            "classId": self.class_id,
        }
