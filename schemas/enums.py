from enum import Enum


# ✅ 과목 유형
class CourseType(str, Enum):
    FUNDAMENTAL = "fundamental"
    MAJOR_SPECIFIC = "major-specific"
    ELECTIVE = "elective"


# ✅ 수강 상태 (failed 상태의 학점이 학사 경고 집계 대상)
class EnrollmentStatus(str, Enum):
    ENROLLED = "enrolled"
    PASSED = "passed"
    FAILED = "failed"
    WITHDRAWN = "withdrawn"


# ✅ 강의 요일
class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"
