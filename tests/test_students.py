"""
학생 CRUD / 검색 / 단건 GPA API 테스트
"""
import logging

import pytest
from sqlalchemy.exc import OperationalError

from conftest import make_student
from main import app
from routers.students import read_student_gpa
from services.exceptions import ReadFailedError
from services.grade_aggregator import get_grade_aggregator


def _student_payload(student_id="20220001", **overrides):
    payload = {
        "student_id": student_id,
        "first_name": "Minh",
        "last_name": "Hoang",
        "dob": "2004-01-09",
        "email": f"{student_id}@uni.test",
        "major_id": 1,
        "cohort_id": 1,
        "program_id": 1,
    }
    payload.update(overrides)
    return payload


def test_create_student_returns_created_row(client, reference_data):
    response = client.post("/api/students", json=_student_payload())

    assert response.status_code == 201
    assert response.json() == _student_payload()


def test_list_students_canonical_order(client, db_session, reference_data):
    for student_id in ("S003", "S001", "S002"):
        make_student(db_session, student_id)

    response = client.get("/api/students")

    assert response.status_code == 200
    assert [s["student_id"] for s in response.json()] == ["S001", "S002", "S003"]


def test_search_students_case_insensitive(client, db_session, reference_data):
    make_student(db_session, "S001", "Lan", "Nguyen", email="lan@uni.test")
    make_student(db_session, "S002", "Hung", "Tran", email="hung@uni.test")
    make_student(db_session, "X777", "Mai", "Ly", email="mai@other.test")

    by_name = client.get("/api/students", params={"q": "nGuY"}).json()
    by_id = client.get("/api/students", params={"q": "x77"}).json()
    by_email = client.get("/api/students", params={"q": "uni.test"}).json()

    assert [s["student_id"] for s in by_name] == ["S001"]
    assert [s["student_id"] for s in by_id] == ["X777"]
    assert [s["student_id"] for s in by_email] == ["S001", "S002"]


def test_empty_search_returns_full_list(client, db_session, reference_data):
    make_student(db_session, "S001")
    make_student(db_session, "S002")

    assert len(client.get("/api/students", params={"q": ""}).json()) == 2


def test_update_student(client, db_session, reference_data):
    make_student(db_session, "S001", "Old", "Name")

    payload = _student_payload("S001", first_name="New")
    payload.pop("student_id")
    response = client.put("/api/students/S001", json=payload)

    assert response.status_code == 200
    assert response.json()["first_name"] == "New"
    assert response.json()["student_id"] == "S001"


def test_update_missing_student_returns_404(client, reference_data):
    payload = _student_payload()
    payload.pop("student_id")

    response = client.put("/api/students/NOPE", json=payload)

    assert response.status_code == 404
    assert response.json() == {"message": "Student not found"}


def test_delete_student(client, db_session, reference_data):
    make_student(db_session, "S001")

    response = client.delete("/api/students/S001")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/students").json() == []


def test_delete_missing_student_is_a_no_op(client, reference_data):
    response = client.delete("/api/students/DOES-NOT-EXIST")

    assert response.status_code == 204


def test_duplicate_student_id_returns_400_with_db_message(client, db_session, reference_data):
    make_student(db_session, "S001")

    response = client.post("/api/students", json=_student_payload("S001"))

    assert response.status_code == 400
    assert "UNIQUE constraint failed" in response.json()["message"]


def test_unknown_major_returns_400(client, reference_data):
    response = client.post("/api/students", json=_student_payload(major_id=999))

    assert response.status_code == 400
    assert "FOREIGN KEY constraint failed" in response.json()["message"]


def test_malformed_body_returns_400(client, reference_data):
    response = client.post("/api/students", json={"student_id": "S001"})

    assert response.status_code == 400
    assert "first_name" in response.json()["message"]


def test_student_gpa_lookup(client, db_session, reference_data, store_functions):
    gpa_table, _ = store_functions
    gpa_table["S001"] = 3.25
    make_student(db_session, "S001")

    response = client.get("/api/students/S001/gpa")

    assert response.status_code == 200
    assert response.json() == {"student_id": "S001", "cumulative_gpa": 3.25}


def test_student_gpa_lookup_unknown_student(client, reference_data):
    response = client.get("/api/students/NOPE/gpa")

    assert response.status_code == 404


class _FailingAggregator:
    def compute_gpa(self, db, student_id):
        raise OperationalError("SELECT get_student_gpa(?)", (student_id,), Exception("function get_student_gpa does not exist"))


def test_student_gpa_lookup_failure_is_logged_and_chained(client, db_session, reference_data, caplog):
    make_student(db_session, "S9")
    app.dependency_overrides[get_grade_aggregator] = _FailingAggregator

    with caplog.at_level(logging.ERROR, logger="routers.students"):
        response = client.get("/api/students/S9/gpa")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to compute student GPA"}
    assert "GPA lookup failed" in caplog.text
    assert "does not exist" in caplog.text

    with pytest.raises(ReadFailedError) as excinfo:
        read_student_gpa("S9", db=db_session, aggregator=_FailingAggregator())
    assert isinstance(excinfo.value.__cause__, OperationalError)
