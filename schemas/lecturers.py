from typing import Optional

from pydantic import BaseModel, ConfigDict


# ✅ 입력용 스키마 (POST/PUT 공통) - lecturer_id는 DB에서 자동 생성
class LecturerCreate(BaseModel):
    first_name: str                          # 이름
    last_name: str                           # 성
    email: Optional[str] = None              # 이메일
    faculty_id: Optional[int] = None         # 소속 학부 ID
    hourly_rate: float = 0                   # 시간당 강의료


class LecturerUpdate(LecturerCreate):
    pass


# ✅ 출력용 스키마 - Numeric 컬럼도 JSON 숫자로 직렬화
class Lecturer(LecturerCreate):
    lecturer_id: int

    model_config = ConfigDict(from_attributes=True)
