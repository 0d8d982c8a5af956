from pydantic import BaseModel, ConfigDict


class ClassroomUpdate(BaseModel):
    capacity: int                     # 수용 인원


class ClassroomCreate(ClassroomUpdate):
    classroom_id: str                 # 강의실 번호 (예: A101)


class Classroom(ClassroomCreate):
    model_config = ConfigDict(from_attributes=True)
