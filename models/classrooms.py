from sqlalchemy import Column, Integer, String
from database.db import Base

class Classroom(Base):
    __tablename__ = "classrooms"  # 강의실 테이블

    classroom_id = Column(String(20), primary_key=True, index=True)   # 강의실 번호 (예: A101)
    capacity = Column(Integer, nullable=False)                       # 수용 인원
