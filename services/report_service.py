"""
services/report_service.py

보고서 조립 계층 (읽기 전용)

- 보고서마다 조인 쿼리 1회 → 행마다 순수 매핑 함수 → frozen 값 객체 목록
- GPA / 급여 값 자체는 DB 함수 결과를 그대로 사용하고, 여기서는
    1) 숫자 타입 정규화 (Decimal/문자열 → float/int, NULL → 0)
    2) 표시용 임계값 판정 (학사 경고 사유, 강의 시간 미달 여부)
  만 수행
- DB 에러가 나면 부분 결과 없이 ReadFailedError (고정 메시지, 상세는 로그)
"""

import logging
from decimal import Decimal
from typing import List, Optional, Union

from sqlalchemy import and_, distinct, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.academic_cohorts import AcademicCohort as AcademicCohortModel
from models.classes import Class as ClassModel
from models.classrooms import Classroom as ClassroomModel
from models.courses import Course as CourseModel
from models.enrollments import Enrollment as EnrollmentModel
from models.lecturers import Lecturer as LecturerModel
from models.majors import Major as MajorModel
from models.students import Student as StudentModel
from schemas.classrooms import Classroom
from schemas.enums import EnrollmentStatus
from schemas.lecturers import Lecturer
from schemas.reports import AcademicWarning, ClassroomUsage, LecturerSalary, StudentGpaRecord
from schemas.students import Student
from services.exceptions import ReadFailedError
from services.grade_aggregator import GradeAggregator

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, str, None]

# ✅ 학사 경고 사유 문구 (프론트에 그대로 표시)
REASON_BOTH = "Low GPA and High Failed Credits"
REASON_LOW_GPA = "Low GPA"
REASON_FAILED_CREDITS = "High Failed Credits"


# ==========================================================
# [1단계] 숫자 정규화
# - 드라이버에 따라 numeric / SUM 결과가 Decimal 또는 문자열로 올 수 있음
# ==========================================================

def as_float(value: Number) -> float:
    if value is None:
        return 0.0
    return float(value)


def as_int(value: Number) -> int:
    if value is None:
        return 0
    return int(float(value))


# ==========================================================
# [2단계] 임계값 판정 (순수 함수)
# ==========================================================

def classify_warning(gpa: Optional[float], failed_credits: int, gpa_threshold: float, credit_threshold: float) -> Optional[str]:
    """
    학사 경고 사유 결정
    - 둘 다 해당       → "Low GPA and High Failed Credits"
    - GPA 만 미달      → "Low GPA"
    - 낙제 학점만 초과 → "High Failed Credits"
    - 둘 다 아님       → None (경고 대상 아님)
    - GPA 가 NULL(성적 없음)이면 GPA 미달로 보지 않음
    """
    low_gpa = gpa is not None and gpa < gpa_threshold
    high_failed = failed_credits > credit_threshold
    if low_gpa and high_failed:
        return REASON_BOTH
    if low_gpa:
        return REASON_LOW_GPA
    if high_failed:
        return REASON_FAILED_CREDITS
    return None


def is_below_hours_threshold(total_hours: float, hours_threshold: float) -> bool:
    return total_hours < hours_threshold


# ==========================================================
# [3단계] 행 → 값 객체 매핑 (순수 함수)
# ==========================================================

def to_student_gpa_record(row) -> StudentGpaRecord:
    return StudentGpaRecord(
        student_id=row.student_id,
        student_name=row.student_name,
        major_name=row.major_name,
        cohort_name=row.cohort_name,
        cumulative_gpa=as_float(row.cumulative_gpa),
        courses_taken=as_int(row.courses_taken),
        failed_credits=as_int(row.failed_credits),
    )


def to_academic_warning(row, gpa_threshold: float, credit_threshold: float) -> Optional[AcademicWarning]:
    raw_gpa = None if row.gpa is None else as_float(row.gpa)
    failed_credits = as_int(row.failed_credits)
    reason = classify_warning(raw_gpa, failed_credits, gpa_threshold, credit_threshold)
    if reason is None:
        return None
    return AcademicWarning(
        student=Student.model_validate(row.Student),
        gpa=as_float(raw_gpa),
        failed_credits=failed_credits,
        warning_reason=reason,
    )


def to_lecturer_salary(row, hours_threshold: float) -> LecturerSalary:
    total_hours = as_int(row.total_hours_per_week)
    return LecturerSalary(
        lecturer=Lecturer.model_validate(row.Lecturer),
        monthly_salary=as_float(row.monthly_salary),
        total_hours_per_week=total_hours,
        is_below_threshold=is_below_hours_threshold(total_hours, as_float(hours_threshold)),
    )


def to_classroom_usage(row) -> ClassroomUsage:
    return ClassroomUsage(
        classroom=Classroom.model_validate(row.Classroom),
        usage_count=as_int(row.usage_count),
    )


# ==========================================================
# [4단계] 공통 서브쿼리 (학생 기준 상관 서브쿼리)
# ==========================================================

def _courses_taken_subquery():
    return (
        select(func.count(distinct(ClassModel.course_id)))
        .select_from(EnrollmentModel)
        .join(ClassModel, EnrollmentModel.class_id == ClassModel.class_id)
        .where(EnrollmentModel.student_id == StudentModel.student_id)
        .correlate(StudentModel)
        .scalar_subquery()
    )


def _failed_credits_subquery():
    return (
        select(func.coalesce(func.sum(CourseModel.credits), 0))
        .select_from(EnrollmentModel)
        .join(ClassModel, EnrollmentModel.class_id == ClassModel.class_id)
        .join(CourseModel, ClassModel.course_id == CourseModel.course_id)
        .where(
            EnrollmentModel.student_id == StudentModel.student_id,
            EnrollmentModel.enrollment_status == EnrollmentStatus.FAILED.value,
        )
        .correlate(StudentModel)
        .scalar_subquery()
    )


def _weekly_hours_subquery(semester_id: int):
    return (
        select(func.coalesce(func.sum(CourseModel.teaching_hours_per_week), 0))
        .select_from(ClassModel)
        .join(CourseModel, ClassModel.course_id == CourseModel.course_id)
        .where(
            ClassModel.lecturer_id == LecturerModel.lecturer_id,
            ClassModel.semester_id == semester_id,
        )
        .correlate(LecturerModel)
        .scalar_subquery()
    )


# ==========================================================
# [5단계] 보고서 조립
# ==========================================================

# ✅ [REPORT] 학생별 누적 GPA
def build_student_gpa_report(db: Session, aggregator: GradeAggregator) -> List[StudentGpaRecord]:
    courses_taken = _courses_taken_subquery().label("courses_taken")
    failed_credits = _failed_credits_subquery().label("failed_credits")

    stmt = (
        select(
            StudentModel.student_id,
            (StudentModel.first_name + " " + StudentModel.last_name).label("student_name"),
            MajorModel.major_name,
            AcademicCohortModel.cohort_name,
            aggregator.gpa_expr(StudentModel.student_id).label("cumulative_gpa"),
            courses_taken,
            failed_credits,
        )
        .select_from(StudentModel)
        .outerjoin(MajorModel, StudentModel.major_id == MajorModel.major_id)
        .outerjoin(AcademicCohortModel, StudentModel.cohort_id == AcademicCohortModel.cohort_id)
        .order_by(courses_taken.desc(), failed_credits.desc(), StudentModel.student_id)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError:
        logger.exception("GPA report query failed")
        raise ReadFailedError("Failed to generate GPA report")
    return [to_student_gpa_record(row) for row in rows]


# ✅ [REPORT] 학사 경고 대상
def build_academic_warnings(
    db: Session,
    aggregator: GradeAggregator,
    gpa_threshold: float,
    credit_threshold: float,
) -> List[AcademicWarning]:
    stats = (
        select(
            StudentModel.student_id.label("student_id"),
            aggregator.raw_gpa_expr(StudentModel.student_id).label("gpa"),
            _failed_credits_subquery().label("failed_credits"),
        )
        .cte("student_stats")
    )
    stmt = (
        select(StudentModel, stats.c.gpa, stats.c.failed_credits)
        .join(stats, stats.c.student_id == StudentModel.student_id)
        .where(or_(stats.c.gpa < gpa_threshold, stats.c.failed_credits > credit_threshold))
        .order_by(StudentModel.student_id)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError:
        logger.exception(
            "Academic warnings query failed (gpaThreshold=%r, creditThreshold=%r)",
            gpa_threshold, credit_threshold,
        )
        raise ReadFailedError("Failed to generate academic warnings report")

    warnings = (to_academic_warning(row, gpa_threshold, credit_threshold) for row in rows)
    return [w for w in warnings if w is not None]


# ✅ [REPORT] 강사별 월 급여 / 주당 강의 시간
def build_lecturer_salaries(
    db: Session,
    aggregator: GradeAggregator,
    semester_id: int,
    hours_threshold: float,
) -> List[LecturerSalary]:
    stmt = (
        select(
            LecturerModel,
            aggregator.monthly_salary_expr(LecturerModel.lecturer_id, semester_id).label("monthly_salary"),
            _weekly_hours_subquery(semester_id).label("total_hours_per_week"),
        )
        .order_by(LecturerModel.last_name, LecturerModel.first_name)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError:
        logger.exception("Lecturer salaries query failed (semesterId=%r)", semester_id)
        raise ReadFailedError("Failed to generate lecturer salaries report")
    return [to_lecturer_salary(row, hours_threshold) for row in rows]


# ✅ [REPORT] 강의실 사용 현황 (배정 0건 강의실도 포함)
def build_classroom_usage(db: Session, semester_id: int) -> List[ClassroomUsage]:
    usage_count = func.count(ClassModel.class_id).label("usage_count")
    stmt = (
        select(ClassroomModel, usage_count)
        .outerjoin(
            ClassModel,
            and_(
                ClassModel.classroom_id == ClassroomModel.classroom_id,
                ClassModel.semester_id == semester_id,
            ),
        )
        .group_by(ClassroomModel.classroom_id, ClassroomModel.capacity)
        .order_by(usage_count.desc())
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError:
        logger.exception("Classroom usage query failed (semesterId=%r)", semester_id)
        raise ReadFailedError("Failed to generate classroom usage report")
    return [to_classroom_usage(row) for row in rows]
