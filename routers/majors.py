from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.majors import Major as MajorModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.majors import Major, MajorCreate, MajorUpdate
from services import crud_service

router = APIRouter(prefix="/majors", tags=["전공 정보"])


@router.get("", response_model=List[Major], responses=READ_ERROR_RESPONSES)
def read_majors(db: Session = Depends(get_db)):
    return crud_service.list_rows(db, MajorModel, order_by=(MajorModel.major_name,), name="majors")


@router.post("", response_model=Major, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_major(major: MajorCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, MajorModel, major.model_dump(), name="major")


@router.put("/{major_id}", response_model=Major, responses=UPDATE_ERROR_RESPONSES)
def update_major(major_id: int, updated: MajorUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, MajorModel, major_id, updated.model_dump(), name="major")


@router.delete("/{major_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_major(major_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, MajorModel, MajorModel.major_id, major_id, name="major")
    return Response(status_code=204)
