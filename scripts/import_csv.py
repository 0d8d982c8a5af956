"""
CSV → DB 초기 데이터 적재 스크립트

사용법:
    python -m scripts.import_csv students data/students.csv

- CSV 헤더는 테이블 컬럼명과 동일해야 함
- 빈 칸은 NULL, 나머지는 컬럼 타입(int/float/date/time)에 맞게 변환
- 한 파일 전체를 한 번에 commit, 중간에 실패하면 전부 rollback
"""

import argparse
import csv
import logging
from datetime import date, time
from decimal import Decimal

from sqlalchemy.orm import Session

from database.db import SessionLocal
from models.academic_cohorts import AcademicCohort
from models.classes import Class
from models.classrooms import Classroom
from models.courses import Course
from models.enrollments import Enrollment
from models.faculties import Faculty
from models.lecturers import Lecturer
from models.majors import Major
from models.semesters import Semester
from models.students import Student
from models.training_programs import TrainingProgram

logger = logging.getLogger(__name__)

# ✅ 테이블명 → 모델 (FK 순서대로 적재해야 함: faculties → majors → ... → enrollments)
MODELS = {
    model.__tablename__: model
    for model in (
        Faculty, Major, AcademicCohort, TrainingProgram, Student, Lecturer,
        Classroom, Semester, Course, Class, Enrollment,
    )
}


def _convert(column, raw: str):
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip()
    python_type = column.type.python_type
    if python_type is int:
        return int(float(value))       # "3.0" 같은 엑셀 출력 대응
    if python_type in (float, Decimal):
        return python_type(value)
    if python_type is date:
        return date.fromisoformat(value)
    if python_type is time:
        return time.fromisoformat(value)
    return value


def row_to_kwargs(model, row: dict) -> dict:
    """CSV 한 줄 → 모델 생성자 인자 (모델에 없는 헤더는 무시)"""
    columns = model.__table__.columns
    return {
        key: _convert(columns[key], value)
        for key, value in row.items()
        if key in columns
    }


def migrate_csv(db: Session, model, path: str) -> int:
    with open(path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        try:
            count = 0
            for row in reader:
                db.add(model(**row_to_kwargs(model, row)))
                count += 1
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("⚠️ %s 적재 실패 (%s)", model.__tablename__, path)
            raise

    logger.info("✅ %s CSV → DB 마이그레이션 완료 (%d건)", model.__tablename__, count)
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(description="CSV 파일을 테이블에 적재")
    parser.add_argument("table", choices=sorted(MODELS))
    parser.add_argument("csv_path")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    db: Session = SessionLocal()
    try:
        migrate_csv(db, MODELS[args.table], args.csv_path)
    finally:
        db.close()


if __name__ == "__main__":
    main()
