from pydantic import BaseModel, ConfigDict


class FacultyCreate(BaseModel):
    faculty_name: str                 # 학부 이름


class FacultyUpdate(FacultyCreate):
    pass


class Faculty(FacultyCreate):
    faculty_id: int

    model_config = ConfigDict(from_attributes=True)
