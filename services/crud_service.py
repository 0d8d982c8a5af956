"""
services/crud_service.py

- 모든 리소스 라우터가 공유하는 CRUD 헬퍼
- HTTP 요청 1건 = SQL 문 1건 원칙 (여러 쓰기를 한 트랜잭션으로 묶지 않음)
- 에러 매핑
    · 조회 실패      → ReadFailedError   (500, 고정 메시지)
    · 쓰기 실패      → WriteFailedError  (400, DB 메시지 그대로)
    · 수정 대상 없음 → NotFoundError     (404)
"""

import logging
from typing import Any, Dict, Iterable, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import db_error_message
from services.exceptions import NotFoundError, ReadFailedError, WriteFailedError

logger = logging.getLogger(__name__)


def search_filter(columns: Iterable, q: str):
    """q 를 대소문자 무시 부분 일치(ILIKE '%q%')로 여러 컬럼에 OR 조건으로 적용"""
    pattern = f"%{q}%"
    return or_(*[column.ilike(pattern) for column in columns])


# ==========================================================
# [READ]
# ==========================================================

def list_rows(
    db: Session,
    model,
    order_by: Sequence,
    search_columns: Sequence = (),
    q: Optional[str] = None,
    name: str = "records",
):
    """전체 목록 조회. q 가 없으면 정렬만 적용된 전체 목록"""
    try:
        query = db.query(model)
        if q and search_columns:
            query = query.filter(search_filter(search_columns, q))
        return query.order_by(*order_by).all()
    except SQLAlchemyError:
        logger.exception("Failed to retrieve %s (q=%r)", name, q)
        raise ReadFailedError(f"Failed to retrieve {name}")


def get_row(db: Session, model, key: Any, name: str):
    """기본 키로 단건 조회. 없으면 NotFoundError"""
    try:
        row = db.get(model, key)
    except SQLAlchemyError:
        logger.exception("Failed to retrieve %s %r", name, key)
        raise ReadFailedError(f"Failed to retrieve {name}")
    if row is None:
        raise NotFoundError(f"{name.capitalize()} not found")
    return row


# ==========================================================
# [WRITE]
# ==========================================================

def create_row(db: Session, model, payload: Dict[str, Any], name: str):
    """INSERT ... RETURNING * 과 같은 효과: 저장 후 refresh 한 행을 반환"""
    try:
        row = model(**payload)
        db.add(row)
        db.commit()
        db.refresh(row)
        return row
    except SQLAlchemyError as exc:
        db.rollback()
        message = db_error_message(exc, f"Failed to create {name}")
        logger.warning("Failed to create %s: %s", name, message)
        raise WriteFailedError(message)


def update_row(db: Session, model, key: Any, payload: Dict[str, Any], name: str):
    """PUT: 키를 제외한 모든 컬럼을 요청 값으로 덮어쓴다. 대상이 없으면 404"""
    try:
        row = db.get(model, key)
        if row is None:
            raise NotFoundError(f"{name.capitalize()} not found")

        for column, value in payload.items():
            setattr(row, column, value)

        db.commit()
        db.refresh(row)
        return row
    except SQLAlchemyError as exc:
        db.rollback()
        message = db_error_message(exc, f"Failed to update {name}")
        logger.warning("Failed to update %s %r: %s", name, key, message)
        raise WriteFailedError(message)


def delete_row(db: Session, model, key_column, key: Any, name: str) -> int:
    """
    DELETE ... WHERE key = :key 한 문장만 실행
    - 대상이 없어도 성공(no-op) 처리 → 라우터는 204 반환
    - 삭제된 행 수를 돌려준다 (로그용)
    """
    try:
        deleted = (
            db.query(model)
            .filter(key_column == key)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        message = db_error_message(exc, f"Failed to delete {name}")
        logger.warning("Failed to delete %s %r: %s", name, key, message)
        raise WriteFailedError(message)

    if not deleted:
        logger.debug("Delete %s %r matched no rows", name, key)
    return deleted
