from datetime import date

from pydantic import BaseModel, ConfigDict


class SemesterUpdate(BaseModel):
    semester_name: str                # 학기 이름 (예: 2024-2025 1학기)
    start_date: date                  # 개강일
    end_date: date                    # 종강일


# ✅ semester_id는 클라이언트가 지정 (예: 20241)
class SemesterCreate(SemesterUpdate):
    semester_id: int


class Semester(SemesterCreate):
    model_config = ConfigDict(from_attributes=True)
