from datetime import time

from pydantic import BaseModel, ConfigDict

from schemas.enums import Weekday


# ✅ 생성(Create)/수정(Update) 요청용 스키마
# → class_id는 DB에서 자동 생성되므로 제외
# → 시간표 충돌/정원/강사 부하는 DB 트리거가 검사 (위반 시 400)
class ClassCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    course_id: str                   # 교과목 코드
    semester_id: int                 # 학기 ID
    lecturer_id: int                 # 담당 강사 ID
    classroom_id: str                # 강의실 번호
    weekday: Weekday                 # 요일
    start_time: time                 # 시작 시각
    end_time: time                   # 종료 시각


class ClassUpdate(ClassCreate):
    pass


# ✅ 응답(Response) / 조회(Read) 용 스키마
class Class(ClassCreate):
    class_id: int

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
