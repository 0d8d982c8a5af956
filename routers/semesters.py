from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.semesters import Semester as SemesterModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.semesters import Semester, SemesterCreate, SemesterUpdate
from services import crud_service

router = APIRouter(prefix="/semesters", tags=["학기 정보"])


# ✅ [READ] 최근 학기부터 (보고서 화면의 학기 선택 목록)
@router.get("", response_model=List[Semester], responses=READ_ERROR_RESPONSES)
def read_semesters(db: Session = Depends(get_db)):
    return crud_service.list_rows(db, SemesterModel, order_by=(SemesterModel.semester_id.desc(),), name="semesters")


@router.post("", response_model=Semester, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_semester(semester: SemesterCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, SemesterModel, semester.model_dump(), name="semester")


@router.put("/{semester_id}", response_model=Semester, responses=UPDATE_ERROR_RESPONSES)
def update_semester(semester_id: int, updated: SemesterUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, SemesterModel, semester_id, updated.model_dump(), name="semester")


@router.delete("/{semester_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_semester(semester_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, SemesterModel, SemesterModel.semester_id, semester_id, name="semester")
    return Response(status_code=204)
