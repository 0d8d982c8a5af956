"""
CSV 적재 스크립트 테스트
"""
from datetime import date, time

import pytest
from sqlalchemy.exc import IntegrityError

from models.classes import Class
from models.classrooms import Classroom
from models.courses import Course
from models.lecturers import Lecturer
from models.students import Student
from scripts.import_csv import MODELS, migrate_csv, row_to_kwargs


def test_models_registered_by_table_name():
    assert MODELS["students"] is Student
    assert MODELS["classes"] is Class
    assert len(MODELS) == 11


def test_row_to_kwargs_converts_types_and_blanks():
    kwargs = row_to_kwargs(Class, {
        "class_id": "3.0", "course_id": "IT1", "semester_id": "20241", "lecturer_id": "1",
        "classroom_id": "A101", "weekday": "Monday", "start_time": "07:00", "end_time": "09:30",
        "note": "ignored",
    })

    assert kwargs["class_id"] == 3
    assert kwargs["start_time"] == time(7, 0)
    assert "note" not in kwargs

    student = row_to_kwargs(Student, {"student_id": "S1", "first_name": "A", "last_name": "B",
                                      "dob": "2004-02-29", "major_id": ""})
    assert student["dob"] == date(2004, 2, 29)
    assert student["major_id"] is None


def test_migrate_csv_loads_rows(db_session, reference_data, tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(
        "student_id,first_name,last_name,dob,email,major_id,cohort_id,program_id\n"
        "S001,An,Tran,2004-01-01,an@uni.test,1,1,1\n"
        "S002,Binh,Le,,binh@uni.test,,,\n",
        encoding="utf-8",
    )

    assert migrate_csv(db_session, Student, str(path)) == 2
    assert db_session.get(Student, "S002").major_id is None
    assert db_session.get(Student, "S001").dob == date(2004, 1, 1)


def test_migrate_csv_rolls_back_on_failure(db_session, reference_data, tmp_path):
    path = tmp_path / "lecturers.csv"
    path.write_text(
        "lecturer_id,first_name,last_name,email,faculty_id,hourly_rate\n"
        "1,Ha,Le,ha@uni.test,1,150000\n"
        "2,Lan,Do,lan@uni.test,99,150000\n",
        encoding="utf-8",
    )

    with pytest.raises(IntegrityError):
        migrate_csv(db_session, Lecturer, str(path))

    assert db_session.query(Lecturer).count() == 0


def test_migrate_csv_numeric_columns(db_session, reference_data, tmp_path):
    path = tmp_path / "classrooms.csv"
    path.write_text("classroom_id,capacity\nA101,45\nB202,120\n", encoding="utf-8")
    migrate_csv(db_session, Classroom, str(path))

    course_path = tmp_path / "courses.csv"
    course_path.write_text(
        "course_id,course_name,credits,teaching_hours_per_week,managing_faculty_id,major_id,course_type\n"
        "IT1,Intro,3,3,1,,fundamental\n",
        encoding="utf-8",
    )
    migrate_csv(db_session, Course, str(course_path))

    assert db_session.get(Classroom, "B202").capacity == 120
    assert db_session.get(Course, "IT1").major_id is None
