from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, is_blank, parse_bool, parse_object_id


class ExpenseCategory:

    FIELDS = ("name", "isActive")

    def __init__(self, name, is_active=True):
        self.name = name
        self.is_active = is_active

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        name = clean_string(payload.get("name"))
        if not name:
            raise ValidationError("Expense category name is required")
        return cls(name, parse_bool(payload.get("isActive"), default=True))

    @classmethod
    def changes_from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        changes = {}
        if "name" in payload:
            name = clean_string(payload["name"])
            if not name:
                raise ValidationError("Expense category name is required")
            changes["name"] = name
        if "isActive" in payload:
            changes["isActive"] = parse_bool(payload["isActive"], default=True)
        return changes

    def to_dict(self):
        return {"name": self.name, "isActive": self.is_active}


class ExpenseItem:

    FIELDS = ("name", "category")

    def __init__(self, name, category_id):
        self.name = name
        self.category_id = category_id

    @classmethod
    def from_payload(cls, payload):
        if not isinstance(payload, dict):
            raise ValidationError("Each expense item must be an object")
        payload = accepted_fields(payload, cls.FIELDS)
        name = clean_string(payload.get("name"))
        if not name:
            raise ValidationError("Expense item name is required")
        if is_blank(payload.get("category")):
            raise ValidationError("Expense category is required")
        return cls(name, parse_object_id(payload["category"], "Invalid expense category ID"))

    @classmethod
    def many_from_payload(cls, payload):
        """Validate every item of a bulk request before anything is written."""
        items = payload.get("items")
        if not isinstance(items, list) or len(items) == 0:
            raise ValidationError("Items array is required")
        return [cls.from_payload(item) for item in items]

    def to_dict(self):
        return {"name": self.name, "category": self.category_id}
