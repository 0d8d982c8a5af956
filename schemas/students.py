from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


# ✅ 수정용 (PUT) - 학번은 경로로 받으므로 제외
class StudentUpdate(BaseModel):
    first_name: str                          # 이름
    last_name: str                           # 성
    dob: Optional[date] = None               # 생년월일
    email: Optional[str] = None              # 이메일
    major_id: Optional[int] = None           # 전공 ID
    cohort_id: Optional[int] = None          # 기수 ID
    program_id: Optional[int] = None         # 교육 과정 ID


# ✅ 입력용 (POST) - 학번은 클라이언트가 직접 지정
class StudentCreate(StudentUpdate):
    student_id: str


# ✅ 전체 출력용 (GET, 보고서의 student 필드 등)
class Student(StudentCreate):
    model_config = ConfigDict(from_attributes=True)
