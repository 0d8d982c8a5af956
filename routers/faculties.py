from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.faculties import Faculty as FacultyModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.faculties import Faculty, FacultyCreate, FacultyUpdate
from services import crud_service

router = APIRouter(prefix="/faculties", tags=["학부 정보"])


@router.get("", response_model=List[Faculty], responses=READ_ERROR_RESPONSES)
def read_faculties(db: Session = Depends(get_db)):
    return crud_service.list_rows(db, FacultyModel, order_by=(FacultyModel.faculty_name,), name="faculties")


@router.post("", response_model=Faculty, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_faculty(faculty: FacultyCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, FacultyModel, faculty.model_dump(), name="faculty")


@router.put("/{faculty_id}", response_model=Faculty, responses=UPDATE_ERROR_RESPONSES)
def update_faculty(faculty_id: int, updated: FacultyUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, FacultyModel, faculty_id, updated.model_dump(), name="faculty")


# ✅ 소속 전공/강사가 남아 있으면 FK 위반 → 400
@router.delete("/{faculty_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_faculty(faculty_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, FacultyModel, FacultyModel.faculty_id, faculty_id, name="faculty")
    return Response(status_code=204)
