import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import get_db
from models.lecturers import Lecturer as LecturerModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.lecturers import Lecturer, LecturerCreate, LecturerUpdate
from schemas.reports import LecturerMonthlySalary
from services import crud_service
from services.exceptions import ReadFailedError
from services.grade_aggregator import GradeAggregator, get_grade_aggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lecturers", tags=["강사 정보"])

SEARCH_COLUMNS = (
    LecturerModel.first_name,
    LecturerModel.last_name,
    LecturerModel.email,
)


# ==========================================================
# [1단계] CRUD 라우터
# ==========================================================

# ✅ [READ] 전체 강사 조회 (성, 이름 순)
@router.get("", response_model=List[Lecturer], responses=READ_ERROR_RESPONSES)
def read_lecturers(q: Optional[str] = None, db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, LecturerModel,
        order_by=(LecturerModel.last_name, LecturerModel.first_name),
        search_columns=SEARCH_COLUMNS,
        q=q,
        name="lecturers",
    )


# ✅ [CREATE] 강사 정보 추가
@router.post("", response_model=Lecturer, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_lecturer(lecturer: LecturerCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, LecturerModel, lecturer.model_dump(), name="lecturer")


# ✅ [READ] 특정 강사의 학기별 월 급여 (DB 함수 단건 호출)
@router.get("/{lecturer_id}/salary", response_model=LecturerMonthlySalary, responses=READ_ERROR_RESPONSES)
def read_lecturer_salary(
    lecturer_id: int,
    semester_id: int = Query(..., alias="semesterId"),
    db: Session = Depends(get_db),
    aggregator: GradeAggregator = Depends(get_grade_aggregator),
):
    crud_service.get_row(db, LecturerModel, lecturer_id, name="lecturer")
    try:
        salary = aggregator.compute_monthly_salary(db, lecturer_id, semester_id)
    except SQLAlchemyError as exc:
        logger.exception("Salary lookup failed (lecturer_id=%r, semesterId=%r)", lecturer_id, semester_id)
        raise ReadFailedError("Failed to compute lecturer salary") from exc
    return LecturerMonthlySalary(lecturer_id=lecturer_id, semester_id=semester_id, monthly_salary=salary)


# ✅ [UPDATE] 강사 정보 수정
@router.put("/{lecturer_id}", response_model=Lecturer, responses=UPDATE_ERROR_RESPONSES)
def update_lecturer(lecturer_id: int, updated: LecturerUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, LecturerModel, lecturer_id, updated.model_dump(), name="lecturer")


# ✅ [DELETE] 강사 삭제
@router.delete("/{lecturer_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_lecturer(lecturer_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, LecturerModel, LecturerModel.lecturer_id, lecturer_id, name="lecturer")
    return Response(status_code=204)
