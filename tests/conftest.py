"""
테스트 공용 설정 / 픽스처

- 앱 import 전에 필수 환경변수 세팅 (settings 는 import 시점에 생성됨)
- PostgreSQL 대신 SQLite 인메모리 DB 사용
    · get_student_gpa / get_lecturer_monthly_salary 는 SQLite 사용자 함수로 등록,
      값은 테스트마다 store_functions 픽스처의 딕셔너리에서 읽음
    · PRAGMA foreign_keys=ON 으로 FK 위반도 재현
"""
import os
from datetime import date, time

os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_NAME", "credit_based_teaching_test")

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db
from main import app
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

fake = Faker()
Faker.seed(1234)

# DB 함수 결과표: 테스트가 채우고, SQLite 함수가 읽음
GPA_TABLE = {}
SALARY_TABLE = {}

sqlite_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(sqlite_engine, "connect")
def _register_store_functions(dbapi_connection, connection_record):
    dbapi_connection.create_function("get_student_gpa", 1, lambda student_id: GPA_TABLE.get(student_id))
    dbapi_connection.create_function(
        "get_lecturer_monthly_salary", 2,
        lambda lecturer_id, semester_id: SALARY_TABLE.get((lecturer_id, semester_id)),
    )
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def store_functions():
    """GPA / 급여 DB 함수가 돌려줄 값을 테스트에서 지정"""
    GPA_TABLE.clear()
    SALARY_TABLE.clear()
    yield GPA_TABLE, SALARY_TABLE
    GPA_TABLE.clear()
    SALARY_TABLE.clear()


@pytest.fixture
def db_session(store_functions):
    Base.metadata.create_all(bind=sqlite_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=sqlite_engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        db = TestSessionLocal()
        try:
            yield db
        finally:
            db.close()

    # with 블록 없이 생성 → startup(실제 PostgreSQL 연결 확인) 은 실행하지 않음
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================================
# [시드 데이터] 참조 테이블 기본 세트
# ==========================================================

@pytest.fixture
def reference_data(db_session):
    faculty = Faculty(faculty_id=1, faculty_name="Faculty of Information Technology")
    major = Major(major_id=1, major_name="Computer Science", faculty_id=1)
    cohort = AcademicCohort(cohort_id=1, cohort_name="K2022", start_year=2022)
    program = TrainingProgram(program_id=1, program_name="Standard")
    semester = Semester(semester_id=20241, semester_name="2024 Spring",
                        start_date=date(2024, 2, 1), end_date=date(2024, 6, 30))
    other_semester = Semester(semester_id=20242, semester_name="2024 Fall",
                              start_date=date(2024, 9, 1), end_date=date(2025, 1, 15))
    db_session.add_all([faculty, major, cohort, program, semester, other_semester])
    db_session.commit()
    return {"faculty_id": 1, "major_id": 1, "cohort_id": 1, "program_id": 1,
            "semester_id": 20241, "other_semester_id": 20242}


def make_student(db_session, student_id, first_name=None, last_name=None, **kwargs):
    student = Student(
        student_id=student_id,
        first_name=first_name or fake.first_name(),
        last_name=last_name or fake.last_name(),
        email=kwargs.pop("email", f"{student_id.lower()}@uni.test"),
        dob=kwargs.pop("dob", date(2003, 5, 17)),
        **kwargs,
    )
    db_session.add(student)
    db_session.commit()
    return student


def make_lecturer(db_session, lecturer_id, last_name, first_name="Alex", **kwargs):
    lecturer = Lecturer(
        lecturer_id=lecturer_id,
        first_name=first_name,
        last_name=last_name,
        email=f"lecturer{lecturer_id}@uni.test",
        faculty_id=kwargs.pop("faculty_id", 1),
        hourly_rate=kwargs.pop("hourly_rate", 250000),
    )
    db_session.add(lecturer)
    db_session.commit()
    return lecturer


def make_course(db_session, course_id, credits=3, hours=3, course_type="fundamental"):
    course = Course(
        course_id=course_id,
        course_name=f"Course {course_id}",
        credits=credits,
        teaching_hours_per_week=hours,
        managing_faculty_id=1,
        course_type=course_type,
    )
    db_session.add(course)
    db_session.commit()
    return course


def make_classroom(db_session, classroom_id, capacity=60):
    classroom = Classroom(classroom_id=classroom_id, capacity=capacity)
    db_session.add(classroom)
    db_session.commit()
    return classroom


def make_class(db_session, class_id, course_id, lecturer_id, classroom_id, semester_id=20241,
               weekday="Monday", start=time(7, 0), end=time(9, 30)):
    new_class = Class(
        class_id=class_id,
        course_id=course_id,
        semester_id=semester_id,
        lecturer_id=lecturer_id,
        classroom_id=classroom_id,
        weekday=weekday,
        start_time=start,
        end_time=end,
    )
    db_session.add(new_class)
    db_session.commit()
    return new_class


def make_enrollment(db_session, student_id, class_id, status="passed"):
    enrollment = Enrollment(student_id=student_id, class_id=class_id, enrollment_status=status)
    db_session.add(enrollment)
    db_session.commit()
    return enrollment
