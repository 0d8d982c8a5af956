"""
services/exceptions.py

- 서비스 계층에서 던지고 middlewares/error_handler.py 에서 HTTP 응답으로 바꾸는 예외 모음
- status_code 가 곧 응답 코드, message 가 곧 응답 바디의 message
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReadFailedError(AppError):
    """조회/보고서 실패 → 500 (상세 원인은 서버 로그에만 남김)"""
    status_code = 500


class WriteFailedError(AppError):
    """쓰기 실패(중복 키, FK 위반, 트리거 거부) → 400 (DB 메시지 그대로 전달)"""
    status_code = 400


class NotFoundError(AppError):
    """수정/단건 조회 대상 없음 → 404"""
    status_code = 404
