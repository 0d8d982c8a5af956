"""
schemas/reports.py

- 보고서 전용 값 객체 (DB에 저장되지 않음, 요청마다 조립 후 폐기)
- 모두 frozen: 조립 이후 값이 바뀌지 않음
- 학생/강사/강의실 원본 레코드는 프론트 표시용으로 중첩(student/lecturer/classroom 키) 형태
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.classrooms import Classroom
from schemas.lecturers import Lecturer
from schemas.students import Student


# ✅ 학생별 누적 GPA 보고서 한 줄
class StudentGpaRecord(BaseModel):
    student_id: str
    student_name: str                                   # "이름 성"
    major_name: Optional[str] = None                    # 전공 미지정 학생은 null
    cohort_name: Optional[str] = None                   # 기수 미지정 학생은 null
    cumulative_gpa: float                               # DB 함수 get_student_gpa 결과
    courses_taken: int = Field(..., ge=0)               # 수강한 서로 다른 과목 수
    failed_credits: int = Field(..., ge=0)              # failed 상태 과목의 학점 합

    model_config = ConfigDict(frozen=True)


# ✅ 학사 경고 대상 학생
class AcademicWarning(BaseModel):
    student: Student
    gpa: float
    failed_credits: int = Field(..., ge=0)
    warning_reason: str

    model_config = ConfigDict(frozen=True)


# ✅ 강사별 월 급여 + 주당 강의 시간
class LecturerSalary(BaseModel):
    lecturer: Lecturer
    monthly_salary: float                               # DB 함수 get_lecturer_monthly_salary 결과
    total_hours_per_week: int = Field(..., ge=0)        # 해당 학기 강좌 주당 시간 합
    is_below_threshold: bool                            # total_hours_per_week < 임계값

    model_config = ConfigDict(frozen=True)


# ✅ 강의실 사용 현황
class ClassroomUsage(BaseModel):
    classroom: Classroom
    usage_count: int = Field(..., ge=0)                 # 해당 학기 배정 강좌 수

    model_config = ConfigDict(frozen=True)


# ==========================================================
# [단건 조회] DB 함수 직접 호출 결과
# ==========================================================
class StudentGpa(BaseModel):
    student_id: str
    cumulative_gpa: float


class LecturerMonthlySalary(BaseModel):
    lecturer_id: int
    semester_id: int
    monthly_salary: float
