"""
services/grade_aggregator.py

- GPA / 월 급여 계산은 DB 함수가 담당 (이 코드베이스에서는 입출력만 알고 있음)
    · get_student_gpa(student_id) → numeric
    · get_lecturer_monthly_salary(lecturer_id, semester_id) → numeric
- 보고서 서비스는 GradeAggregator 인터페이스에만 의존 → 저장소 구현과 분리
"""

from typing import Any, Protocol

from sqlalchemy import Float, cast, func, select
from sqlalchemy.orm import Session


class GradeAggregator(Protocol):
    def raw_gpa_expr(self, student_id: Any): ...

    def gpa_expr(self, student_id: Any): ...

    def monthly_salary_expr(self, lecturer_id: Any, semester_id: Any): ...

    def compute_gpa(self, db: Session, student_id: str) -> float: ...

    def compute_monthly_salary(self, db: Session, lecturer_id: int, semester_id: int) -> float: ...


class StoredFunctionAggregator:
    """DB 저장 함수(get_student_gpa, get_lecturer_monthly_salary)를 호출하는 어댑터"""

    # ==========================================================
    # [SQL 식] 보고서 쿼리 안에 그대로 끼워 넣는 용도 (조인 1회로 끝내기 위함)
    # - numeric 결과를 float 로 캐스팅, NULL(성적 없음 등)은 0.0
    # ==========================================================
    def raw_gpa_expr(self, student_id):
        # 필터용: NULL 은 그대로 두어야 "NULL < 임계값" 이 참이 되지 않음
        return cast(func.get_student_gpa(student_id), Float)

    def gpa_expr(self, student_id):
        return func.coalesce(self.raw_gpa_expr(student_id), 0.0)

    def monthly_salary_expr(self, lecturer_id, semester_id):
        return func.coalesce(
            cast(func.get_lecturer_monthly_salary(lecturer_id, semester_id), Float), 0.0
        )

    # ==========================================================
    # [단건 계산]
    # ==========================================================
    def compute_gpa(self, db: Session, student_id: str) -> float:
        value = db.execute(select(self.gpa_expr(student_id))).scalar()
        return float(value or 0.0)

    def compute_monthly_salary(self, db: Session, lecturer_id: int, semester_id: int) -> float:
        value = db.execute(select(self.monthly_salary_expr(lecturer_id, semester_id))).scalar()
        return float(value or 0.0)


_default_aggregator = StoredFunctionAggregator()


def get_grade_aggregator() -> GradeAggregator:
    """FastAPI 의존성. 테스트에서는 dependency_overrides 로 교체 가능"""
    return _default_aggregator
