from sqlalchemy import Column, Integer, String, Time, ForeignKey
from database.db import Base

class Class(Base):
    __tablename__ = "classes"  # 개설 강좌(분반) 테이블

    class_id = Column(Integer, primary_key=True, index=True)                                  # 강좌 고유 ID (serial)
    course_id = Column(String(20), ForeignKey("courses.course_id"), nullable=False)          # 교과목 (FK)
    semester_id = Column(Integer, ForeignKey("semesters.semester_id"), nullable=False)       # 학기 (FK)
    lecturer_id = Column(Integer, ForeignKey("lecturers.lecturer_id"), nullable=False)      # 담당 강사 (FK)
    classroom_id = Column(String(20), ForeignKey("classrooms.classroom_id"), nullable=False)  # 강의실 (FK)

    # ==========================================================
    # [시간표]
    # - 강의실/시간 충돌, 정원, 강사 부하 제한은 DB 트리거가 검사
    # ==========================================================
    weekday = Column(String(10), nullable=False)    # 요일 (Monday ~ Sunday)
    start_time = Column(Time, nullable=False)       # 시작 시각
    end_time = Column(Time, nullable=False)         # 종료 시각
