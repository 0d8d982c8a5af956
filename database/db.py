import logging

from sqlalchemy import create_engine, text          # SQLAlchemy 엔진 생성 도구
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base          # 모델의 Base 클래스
from sqlalchemy.orm import sessionmaker              # 세션 팩토리 함수

from config.settings import settings                 # ✅ 환경변수 설정 파일 불러오기

logger = logging.getLogger(__name__)

# ✅ 프로세스 전역 커넥션 풀
#    - 요청 하나당 커넥션 하나를 빌려 쓰고 반환
#    - 풀이 가득 차면 대기(지연 증가)만 발생, 별도 실패 처리 없음
engine = create_engine(
    settings.DATABASE_URL,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=settings.DB_POOL_PRE_PING,
)

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ==========================================================
# [공통] DB 세션 관리
# - 모든 요청에서 DB 연결을 생성하고 종료 (에러가 나도 반드시 close)
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection(bind=None) -> bool:
    """기동 시 DB 연결 확인. 실패해도 서버는 계속 뜬다 (경고 로그만 남김)"""
    bind = bind if bind is not None else engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("❌ Failed to connect to the database. Check credentials and DB availability: %s", exc)
        return False
    logger.info("✅ Connected to the database successfully.")
    return True


def db_error_message(exc: Exception, fallback: str) -> str:
    """
    드라이버 에러에서 사람이 읽을 수 있는 1차 메시지만 추출
    - psycopg2: diag.message_primary (예: duplicate key value violates unique constraint ...)
    - 그 외 드라이버: 원본 예외 문자열의 첫 줄
    """
    orig = getattr(exc, "orig", None)
    primary = getattr(getattr(orig, "diag", None), "message_primary", None)
    if primary:
        return primary
    if orig is not None and str(orig).strip():
        return str(orig).strip().splitlines()[0]
    return fallback
