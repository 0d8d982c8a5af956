from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from schemas.common import READ_ERROR_RESPONSES
from schemas.reports import AcademicWarning, ClassroomUsage, LecturerSalary, StudentGpaRecord
from services import report_service
from services.grade_aggregator import GradeAggregator, get_grade_aggregator

router = APIRouter(prefix="/reports", tags=["보고서"])

# ==========================================================
# [보고서] 읽기 전용 집계
# - GPA / 급여 계산은 DB 함수, 여기서는 조립 + 임계값 판정만
# - 실패 시 부분 결과 없이 500 + 고정 메시지
# ==========================================================


# ✅ [REPORT] 학생별 누적 GPA (수강 과목 수 ↓, 낙제 학점 ↓ 순)
@router.get("/student-gpa", response_model=List[StudentGpaRecord], responses=READ_ERROR_RESPONSES)
def student_gpa_report(
    db: Session = Depends(get_db),
    aggregator: GradeAggregator = Depends(get_grade_aggregator),
):
    return report_service.build_student_gpa_report(db, aggregator)


# ✅ [REPORT] 학사 경고 대상 (GPA 미달 OR 낙제 학점 초과)
@router.get("/academic-warnings", response_model=List[AcademicWarning], responses=READ_ERROR_RESPONSES)
def academic_warnings_report(
    gpa_threshold: float = Query(..., alias="gpaThreshold"),
    credit_threshold: float = Query(..., alias="creditThreshold"),
    db: Session = Depends(get_db),
    aggregator: GradeAggregator = Depends(get_grade_aggregator),
):
    return report_service.build_academic_warnings(db, aggregator, gpa_threshold, credit_threshold)


# ✅ [REPORT] 강사별 월 급여 + 주당 강의 시간 미달 여부
# - hoursThreshold 생략 시 settings.LECTURER_HOURS_THRESHOLD
@router.get("/lecturer-salaries", response_model=List[LecturerSalary], responses=READ_ERROR_RESPONSES)
def lecturer_salaries_report(
    semester_id: int = Query(..., alias="semesterId"),
    hours_threshold: Optional[float] = Query(None, alias="hoursThreshold"),
    db: Session = Depends(get_db),
    aggregator: GradeAggregator = Depends(get_grade_aggregator),
):
    """
    강사별 월 급여와 주당 강의 시간

    - semesterId: 필수
    - hoursThreshold: 선택, 생략하면 LECTURER_HOURS_THRESHOLD 설정값(기본 8)
    - is_below_threshold = total_hours_per_week < hoursThreshold
    """
    if hours_threshold is None:
        hours_threshold = settings.LECTURER_HOURS_THRESHOLD
    return report_service.build_lecturer_salaries(db, aggregator, semester_id, hours_threshold)


# ✅ [REPORT] 강의실 사용 현황 (사용 횟수 ↓)
@router.get("/classroom-usage", response_model=List[ClassroomUsage], responses=READ_ERROR_RESPONSES)
def classroom_usage_report(
    semester_id: int = Query(..., alias="semesterId"),
    db: Session = Depends(get_db),
):
    return report_service.build_classroom_usage(db, semester_id)
