from sqlalchemy import Column, Integer, String
from database.db import Base

class TrainingProgram(Base):
    __tablename__ = "training_programs"  # 교육 과정(프로그램) 테이블

    program_id = Column(Integer, primary_key=True, index=True)  # 과정 고유 ID
    program_name = Column(String(150), nullable=False)         # 과정 이름 (예: 정규, 고급)
