from sqlalchemy import Column, Integer, String, Date
from database.db import Base

class Semester(Base):
    __tablename__ = "semesters"  # 학기 테이블

    semester_id = Column(Integer, primary_key=True, autoincrement=False, index=True)  # 학기 ID (예: 20241)
    semester_name = Column(String(100), nullable=False)                              # 학기 이름
    start_date = Column(Date, nullable=False)                                        # 개강일
    end_date = Column(Date, nullable=False)                                          # 종강일
