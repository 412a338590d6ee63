from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string


class ContactInfo:

    FIELDS = ("address", "phone1", "phone2", "email", "eiin", "googleMapLink")

    def __init__(self, address, phone1, email, eiin, phone2="", google_map_link=""):
        self.address = address
        self.phone1 = phone1
        self.phone2 = phone2
        self.email = email
        self.eiin = eiin  # Educational Institute Identification Number
        self.google_map_link = google_map_link

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.FIELDS)
        values = {key: clean_string(payload.get(key)) for key in cls.FIELDS}
        if not all([values["address"], values["phone1"], values["email"], values["eiin"]]):
            raise ValidationError("Address, phone1, email and EIIN are required")
        return cls(
            address=values["address"],
            phone1=values["phone1"],
            email=values["email"],
            eiin=values["eiin"],
            phone2=values["phone2"],
            google_map_link=values["googleMapLink"],
        )

    def to_dict(self):
        return {
            "address": self.address,
            "phone1": self.phone1,
            "phone2": self.phone2,
            "email": self.email,
            "eiin": self.eiin,
            "googleMapLink": self.google_map_link,
        }
