from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.classrooms import Classroom as ClassroomModel
from schemas.classrooms import Classroom, ClassroomCreate, ClassroomUpdate
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from services import crud_service

router = APIRouter(prefix="/classrooms", tags=["강의실 정보"])


@router.get("", response_model=List[Classroom], responses=READ_ERROR_RESPONSES)
def read_classrooms(db: Session = Depends(get_db)):
    return crud_service.list_rows(db, ClassroomModel, order_by=(ClassroomModel.classroom_id,), name="classrooms")


@router.post("", response_model=Classroom, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_classroom(classroom: ClassroomCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, ClassroomModel, classroom.model_dump(), name="classroom")


# ✅ 정원 변경 (정원 초과 여부는 DB 트리거가 판단)
@router.put("/{classroom_id}", response_model=Classroom, responses=UPDATE_ERROR_RESPONSES)
def update_classroom(classroom_id: str, updated: ClassroomUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, ClassroomModel, classroom_id, updated.model_dump(), name="classroom")


@router.delete("/{classroom_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_classroom(classroom_id: str, db: Session = Depends(get_db)):
    crud_service.delete_row(db, ClassroomModel, ClassroomModel.classroom_id, classroom_id, name="classroom")
    return Response(status_code=204)
