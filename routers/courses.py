from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from database.db import get_db
from models.courses import Course as CourseModel
from schemas.common import READ_ERROR_RESPONSES, UPDATE_ERROR_RESPONSES, WRITE_ERROR_RESPONSES
from schemas.courses import Course, CourseCreate, CourseUpdate
from services import crud_service

router = APIRouter(prefix="/courses", tags=["교과목 정보"])

SEARCH_COLUMNS = (CourseModel.course_id, CourseModel.course_name)


# ✅ [READ] 전체 교과목 조회 (q: 과목 코드/이름 부분 검색)
@router.get("", response_model=List[Course], responses=READ_ERROR_RESPONSES)
def read_courses(q: Optional[str] = None, db: Session = Depends(get_db)):
    return crud_service.list_rows(
        db, CourseModel,
        order_by=(CourseModel.course_id,),
        search_columns=SEARCH_COLUMNS,
        q=q,
        name="courses",
    )


# ✅ [CREATE] 교과목 추가
@router.post("", response_model=Course, status_code=201, responses=WRITE_ERROR_RESPONSES)
def create_course(course: CourseCreate, db: Session = Depends(get_db)):
    return crud_service.create_row(db, CourseModel, course.model_dump(), name="course")


# ✅ [UPDATE] 교과목 수정
@router.put("/{course_id}", response_model=Course, responses=UPDATE_ERROR_RESPONSES)
def update_course(course_id: str, updated: CourseUpdate, db: Session = Depends(get_db)):
    return crud_service.update_row(db, CourseModel, course_id, updated.model_dump(), name="course")


# ✅ [DELETE] 교과목 삭제
@router.delete("/{course_id}", status_code=204, responses=WRITE_ERROR_RESPONSES)
def delete_course(course_id: str, db: Session = Depends(get_db)):
    crud_service.delete_row(db, CourseModel, CourseModel.course_id, course_id, name="course")
    return Response(status_code=204)
