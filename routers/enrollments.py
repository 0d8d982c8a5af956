from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.enrollments import Enrollment as EnrollmentModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.enrollments import Enrollment, EnrollmentCreate, EnrollmentUpdate
from services import crud_service

router = APIRouter(prefix="/enrollments", tags=["수강 신청/성적"])


# ✅ [READ] 전체 수강 내역 (최근 신청 순)
@router.get("", response_model=List[Enrollment], responses=READ_ERROR_RESPONSES)
def read_enrollments(db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, EnrollmentModel, order_by=(EnrollmentModel.enrollment_id.desc(),), name="enrollments",
    )


# ✅ [CREATE] 수강 신청 (정원 초과 등은 DB 트리거가 거부)
@router.post("", response_model=Enrollment, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_enrollment(enrollment: EnrollmentCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, EnrollmentModel, enrollment.model_dump(), name="enrollment")


# ✅ [UPDATE] 성적 입력 / 상태 변경 (passed, failed ...)
@router.put("/{enrollment_id}", response_model=Enrollment, responses=UPDATE_ERROR_RESPONSES)
def update_enrollment(enrollment_id: int, updated: EnrollmentUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, EnrollmentModel, enrollment_id, updated.model_dump(), name="enrollment")


@router.delete("/{enrollment_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_enrollment(enrollment_id: int, db: Session = Depends(get_db)):
    crud_service.delete_row(db, EnrollmentModel, EnrollmentModel.enrollment_id, enrollment_id, name="enrollment")
    return Response(status_code=204)
