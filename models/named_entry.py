import re

from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string


class Menu:
    """Website navigation menu; only a name."""

    FIELDS = ("name",)
    NAME_REQUIRED = "মেনু নাম আবশ্যক"

    def __init__(self, name):
        self.name = name

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        name = clean_string(payload.get("name"))
        if not name:
            raise ValidationError(cls.NAME_REQUIRED)
        return cls(name)

    @classmethod
    def name_from_update(cls, payload, current_name):
        """On update the name is optional; an omitted name keeps the current one."""
        payload = accepted_fields(payload, cls.FIELDS)
        return clean_string(payload.get("name")) or current_name

    def to_dict(self):
        return {"name": self.name}


class Playlist(Menu):
    """Video playlist; only a name."""

    NAME_REQUIRED = "প্লেলিস্ট নাম আবশ্যক"


class BlogCategory(Menu):

    NAME_REQUIRED = "ক্যাটাগরি নাম প্রয়োজন"

    @staticmethod
    def slugify(name):
        slug = re.sub(r"\s+", "-", name.strip().lower())
        # keep the Bengali block whole; \w alone drops its vowel signs
        return re.sub(r"[^\w\-\u0980-\u09FF]+", "", slug)

    def to_dict(self):
        return {"name": self.name, "slug": self.slugify(self.name)}
