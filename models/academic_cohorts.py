from sqlalchemy import Column, Integer, String
from database.db import Base

class AcademicCohort(Base):
    __tablename__ = "academic_cohorts"  # 입학 연도별 학번(기수) 테이블

    cohort_id = Column(Integer, primary_key=True, index=True)   # 기수 고유 ID
    cohort_name = Column(String(50), nullable=False)           # 기수 이름 (예: K2022)
    start_year = Column(Integer, nullable=False)               # 입학 연도
