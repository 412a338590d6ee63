# models/__init__.py

from .attendance_settings import AttendanceSettings
from .attendance_shift import AttendanceShift
from .admission_info import AdmissionInfo
from .contact_info import ContactInfo
from .basic_settings import BasicSettings
from .exam_category import ExamCategory
from .grading import Grading, GradeRange
from .advance_fee import AdvanceFee
from .expense import ExpenseCategory, ExpenseItem
from .named_entry import Menu, Playlist, BlogCategory
from .seat_plan import SeatPlan
from .exam_timetable import ExamTimetable
from .section import Section
from .teacher_lesson import TeacherLesson

__all__ = [
    "AttendanceSettings",
    "AttendanceShift",
    "AdmissionInfo",
    "ContactInfo",
    "BasicSettings",
    "ExamCategory",
    "Grading",
    "GradeRange",
    "AdvanceFee",
    "ExpenseCategory",
    "ExpenseItem",
    "Menu",
    "Playlist",
    "BlogCategory",
    "SeatPlan",
    "ExamTimetable",
    "Section",
    "TeacherLesson"
]
