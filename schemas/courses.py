from typing import Optional

from pydantic import BaseModel, ConfigDict

from schemas.enums import CourseType


class CourseUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)   # DB 에는 문자열 값 그대로 저장

    course_name: str                          # 과목 이름
    credits: int                              # 학점
    teaching_hours_per_week: int              # 주당 강의 시간
    managing_faculty_id: int                  # 관리 학부 ID
    major_id: Optional[int] = None            # 전공 과목일 때만 지정
    course_type: CourseType                   # fundamental / major-specific / elective


class CourseCreate(CourseUpdate):
    course_id: str                            # 과목 코드


class Course(CourseCreate):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
