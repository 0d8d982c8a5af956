from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from database.db import Base

class Lecturer(Base):
    __tablename__ = "lecturers"  # 강사(교수) 정보 테이블

    lecturer_id = Column(Integer, primary_key=True, index=True)                 # 강사 고유 ID (serial)
    first_name = Column(String(100), nullable=False)                           # 이름
    last_name = Column(String(100), nullable=False)                            # 성
    email = Column(String(150), unique=True)                                   # 이메일
    faculty_id = Column(Integer, ForeignKey("faculties.faculty_id"))           # 소속 학부 (FK)
    hourly_rate = Column(Numeric(12, 2), nullable=False, default=0)            # 시간당 강의료
