from pydantic import BaseModel, ConfigDict


class MajorCreate(BaseModel):
    major_name: str                   # 전공 이름
    faculty_id: int                   # 소속 학부 ID


class MajorUpdate(MajorCreate):
    pass


class Major(MajorCreate):
    major_id: int

    model_config = ConfigDict(from_attributes=True)
