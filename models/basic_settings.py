from utils.errors import ValidationError
from utils.validation import accepted_fields, clean_string, parse_bool, parse_int


class BasicSettings:
    """
    Institute-wide switches. The stored document only holds what has been
    saved; DEFAULTS answers for a fresh installation.
    """

    DEFAULTS = {
        "language": "bangla",
        "studentIdFormat": "",
        "studentOrderBy": "name",
        "resultType": "grade",
        "failCountBySubjectNumber": 1,
        "showRankingOnTabularResult": False,
        "showRankingOnMarksheet": False,
        "showCtNumber": False,
        "countOptionalSubjectForGpa": False,
        "showAttendanceOnResult": False,
        "invoiceStartNumber": 1,
        "voucherStartNumber": 1,
        "showFeeOnStudentPage": False,
        "showFeeAllocationOnStudentPage": False,
        "showInstituteWithBranch": False,
        "marksheetContentInEnglish": False,
        "generateFullYearFee": False,
        "showInvoiceNumberField": False,
        "showCollectorField": False,
        "showSeatNumberInAdmitCard": False,
        "hideFinanceForNonAdmin": False,
        "secondTimePunch": 30,
        "attendanceType": "both",
        "showAddressDetails": False,
        "showBatchAndSection": False,
        "showCollectFeeListView": False,
        "showExpenseCategoryListInExpense": False,
        "showDekhalaNumber": False,
        "showSubtotalWithExpenseItem": False,
        "manageExpenseWithCategory": False,
        "showIdCardPrint": False,
        "guardianWillPayOnlinePaymentCharge": False,
        "hideTeacherNumber": False,
    }

    def __init__(self, values):
        self.values = values

    @classmethod
    def from_payload(cls, payload):
        payload = accepted_fields(payload, cls.DEFAULTS)
        if not payload:
            raise ValidationError("At least one setting is required")

        values = {}
        for key, value in payload.items():
            default = cls.DEFAULTS[key]
            if isinstance(default, bool):
                values[key] = parse_bool(value, default=default)
            elif isinstance(default, int):
                values[key] = parse_int(value, f"{key} must be a whole number", default=default)
            else:
                values[key] = clean_string(value)
        return cls(values)

    @classmethod
    def defaults(cls):
        return dict(cls.DEFAULTS)

    def to_dict(self):
        return dict(self.values)
