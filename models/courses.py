from sqlalchemy import Column, Integer, String, ForeignKey
from database.db import Base

class Course(Base):
    __tablename__ = "courses"  # 교과목 테이블

    course_id = Column(String(20), primary_key=True, index=True)                          # 과목 코드 (예: IT3011)
    course_name = Column(String(200), nullable=False)                                    # 과목 이름
    credits = Column(Integer, nullable=False)                                            # 학점
    teaching_hours_per_week = Column(Integer, nullable=False)                            # 주당 강의 시간
    managing_faculty_id = Column(Integer, ForeignKey("faculties.faculty_id"), nullable=False)  # 관리 학부 (FK)
    major_id = Column(Integer, ForeignKey("majors.major_id"), nullable=True)             # 전공 과목일 때만 지정
    course_type = Column(String(20), nullable=False)                                     # fundamental / major-specific / elective
