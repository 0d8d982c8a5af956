import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import get_db
from models.students import Student as StudentModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.reports import StudentGpa
from schemas.students import Student, StudentCreate, StudentUpdate
from services import crud_service
from services.exceptions import ReadFailedError
from services.grade_aggregator import GradeAggregator, get_grade_aggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["학생 정보"])

# ✅ q 검색 대상 컬럼 (학번/이름/성/이메일)
SEARCH_COLUMNS = (
    StudentModel.student_id,
    StudentModel.first_name,
    StudentModel.last_name,
    StudentModel.email,
)


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [READ] 전체 학생 조회 (q: 부분 검색, 없으면 학번순 전체)
@router.get("", response_model=List[Student], responses=READ_ERROR_RESPONSES)
def read_students(q: Optional[str] = None, db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, StudentModel,
        order_by=(StudentModel.student_id,),
        search_columns=SEARCH_COLUMNS,
        q=q,
        name="students",
    )


# ✅ [CREATE] 학생 정보 추가
@router.post("", response_model=Student, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, StudentModel, student.model_dump(), name="student")


# ==========================================================
# [2단계] 혼합 라우터 (DB 함수 단건 호출)
# ==========================================================

# ✅ [READ] 특정 학생 누적 GPA
@router.get("/{student_id}/gpa", response_model=StudentGpa, responses=READ_ERROR_RESPONSES)
def read_student_gpa(
    student_id: str,
    db: Session = Depends(get_db),
    aggregator: GradeAggregator = Depends(get_grade_aggregator),
):
    crud_service.get_row(db, StudentModel, student_id, name="student")
    try:
        gpa = aggregator.compute_gpa(db, student_id)
    except SQLAlchemyError as exc:
        logger.exception("GPA lookup failed (student_id=%r)", student_id)
        raise ReadFailedError("Failed to compute student GPA") from exc
    return StudentGpa(student_id=student_id, cumulative_gpa=gpa)


# ==========================================================
# [3단계] 동적 라우터 (개별 수정/삭제)
# ==========================================================

# ✅ [UPDATE] 특정 학생 정보 수정 (없으면 404)
@router.put("/{student_id}", response_model=Student, responses=UPDATE_ERROR_RESPONSES)
def update_student(student_id: str, updated: StudentUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, StudentModel, student_id, updated.model_dump(), name="student")


# ✅ [DELETE] 특정 학생 삭제 (없는 학번이어도 204)
@router.delete("/{student_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_student(student_id: str, db: Session = Depends(get_db)):
    crud_service.delete_row(db, StudentModel, StudentModel.student_id, student_id, name="student")
    return Response(status_code=204)
