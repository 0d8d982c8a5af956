import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.exceptions import AppError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    # 프론트는 message 필드만 화면에 그대로 표시
    return JSONResponse(status_code=status_code, content={"message": message})


def _validation_message(exc: RequestValidationError) -> str:
    """첫 번째 검증 오류를 '위치: 내용' 한 줄로 요약"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "Invalid request")


def add_error_handlers(app: FastAPI):
    # ✅ 서비스 계층 예외 (조회 실패 500 / 쓰기 실패 400 / 대상 없음 404)
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    # ✅ 본문/쿼리 파라미터 형식 오류 → 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _error(400, message)

    # ✅ 그 외 예외: 상세 원인은 로그에만, 응답은 고정 메시지
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")
