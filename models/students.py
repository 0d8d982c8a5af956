from sqlalchemy import Column, Integer, String, Date, ForeignKey
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    student_id = Column(String(20), primary_key=True, index=True)               # 학번 (클라이언트가 직접 지정)
    first_name = Column(String(100), nullable=False)                           # 이름
    last_name = Column(String(100), nullable=False)                            # 성
    dob = Column(Date)                                                         # 생년월일
    email = Column(String(150), unique=True)                                   # 이메일
    major_id = Column(Integer, ForeignKey("majors.major_id"))                  # 전공 (FK)
    cohort_id = Column(Integer, ForeignKey("academic_cohorts.cohort_id"))      # 기수 (FK)
    program_id = Column(Integer, ForeignKey("training_programs.program_id"))   # 교육 과정 (FK)
