"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- 에러 응답은 프론트가 message 필드만 읽으므로 { "message": ... } 한 가지 형태로 통일
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러(middlewares/error_handler.py)가 내려주는 표준 에러 응답
    - responses={...} 에 넣어두면 Swagger 문서에도 표시됨
    """
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")

    model_config = ConfigDict(extra="ignore")


class HealthStatus(BaseModel):
    """GET /api/health 응답"""
    status: str
    now: Optional[datetime] = None
    message: Optional[str] = None


# ✅ 라우터 공통 에러 응답 문서화용
WRITE_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "DB 제약 조건 위반 (중복 키, FK, 트리거)"},
}
UPDATE_ERROR_RESPONSES = {
    **WRITE_ERROR_RESPONSES,
    404: {"model": ErrorResponse, "description": "수정 대상 없음"},
}
READ_ERROR_RESPONSES = {
    500: {"model": ErrorResponse, "description": "조회 실패"},
}
