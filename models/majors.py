from sqlalchemy import Column, Integer, String, ForeignKey
from database.db import Base

class Major(Base):
    __tablename__ = "majors"  # 전공 테이블

    major_id = Column(Integer, primary_key=True, index=True)                     # 전공 고유 ID (serial)
    major_name = Column(String(150), nullable=False)                            # 전공 이름
    faculty_id = Column(Integer, ForeignKey("faculties.faculty_id"), nullable=False)  # 소속 학부 (FK)
