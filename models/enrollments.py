from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from database.db import Base

class Enrollment(Base):
    __tablename__ = "enrollments"  # 수강 신청/성적 테이블

    enrollment_id = Column(Integer, primary_key=True, index=True)                        # 수강 고유 ID (serial)
    student_id = Column(String(20), ForeignKey("students.student_id"), nullable=False)  # 학생 (FK)
    class_id = Column(Integer, ForeignKey("classes.class_id"), nullable=False)          # 강좌 (FK)
    grade_10_scale = Column(Numeric(4, 2))                                              # 10점 만점 성적
    grade_4_scale = Column(Numeric(3, 2))                                               # 4점 만점 성적
    grade_letter = Column(String(2))                                                    # 등급 (A, B+, ...)
    enrollment_status = Column(String(20), nullable=False, default="enrolled")          # enrolled / passed / failed / withdrawn
