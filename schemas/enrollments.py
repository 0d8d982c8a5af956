from typing import Optional

from pydantic import BaseModel, ConfigDict

from schemas.enums import EnrollmentStatus


class EnrollmentCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    student_id: str                                   # 학번
    class_id: int                                     # 강좌 ID
    grade_10_scale: Optional[float] = None            # 10점 만점 성적
    grade_4_scale: Optional[float] = None             # 4점 만점 성적
    grade_letter: Optional[str] = None                # 등급
    enrollment_status: EnrollmentStatus = EnrollmentStatus.ENROLLED.value


class EnrollmentUpdate(EnrollmentCreate):
    pass


class Enrollment(EnrollmentCreate):
    enrollment_id: int

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
