# navigator/core/config.py
# -----------------------------------------------------------------------------
# 전역 설정 관리 (pydantic-settings v2)
# - .env 파일과 OS 환경변수를 읽어 Settings 객체로 제공
# - 타입 세이프티/기본값/도움말을 함께 정의
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본
    APP_NAME: str = "AI 프랜차이즈 성공 내비게이터"
    ENV: str = "dev"

    # Gemini
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # 로깅
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # 분석 진행 중 중복 요청 허용 여부 (기본: 거부)
    ALLOW_CONCURRENT_ANALYSIS: bool = False

    # 오프라인 데모용: 지정 시 Gemini 대신 파일 내용을 응답으로 사용
    NAVIGATOR_FAKE_RESPONSE_FILE: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # .env에 추가 필드 무시
    )


settings = Settings()
