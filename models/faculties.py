from sqlalchemy import Column, Integer, String
from database.db import Base

class Faculty(Base):
    __tablename__ = "faculties"  # 학부(단과대학) 테이블

    faculty_id = Column(Integer, primary_key=True, index=True)       # 학부 고유 ID (serial)
    faculty_name = Column(String(150), nullable=False, unique=True)  # 학부 이름
