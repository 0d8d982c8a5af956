from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.classes import Class as ClassModel
from schemas.classes import Class, ClassCreate, ClassUpdate
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from services import crud_service

router = APIRouter(prefix="/classes", tags=["개설 강좌"])

# ==========================================================
# [1단계] CRUD 기본 라우터
# - 강의실/시간 충돌, 정원, 강사 주당 시간 제한은 DB 트리거가 거부 → 400 으로 메시지 전달
# ==========================================================

# ✅ [READ] 전체 강좌 조회 (최근 개설 순)
@router.get("", response_model=List[Class], responses=READ_ERROR_RESPONSES)
def read_classes(db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, ClassModel, order_by=(ClassModel.class_id.desc(),), name="classes",
    )


# ✅ [CREATE] 강좌 개설
@router.post("", response_model=Class, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_class(new_class: ClassCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, ClassModel, new_class.model_dump(), name="class")


# ==========================================================
# [2단계] 동적 라우터
# ==========================================================

# ✅ [UPDATE] 강좌 정보 수정 (강의실, 요일, 시간, 담당 강사 등)
@router.put("/{class_id}", response_model=Class, responses=UPDATE_ERROR_RESPONSES)
def update_class(class_id: int, updated: ClassUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, ClassModel, class_id, updated.model_dump(), name="class")


# ✅ [DELETE] 강좌 삭제
@router.delete("/{class_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_class(class_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, ClassModel, ClassModel.class_id, class_id, name="class")
    return Response(status_code=204)
