"""
장소 통계 스크립트
----------------
places 테이블의 전체/활성/비활성 장소 수를 출력합니다.
"""

import logging
import sys
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

BACKEND_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(BACKEND_ROOT / ".env")

# 패키지 import를 위해 경로 추가
sys.path.insert(0, str(BACKEND_ROOT))

from sunnomad.core.config import settings
from sunnomad.core.errors import DiagnosticQueryError
from sunnomad.core.logging import configure_logging
from sunnomad.db.session import SessionLocal
from sunnomad.services.diagnostics import place_statistics

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(settings.log_level)

    db = SessionLocal()
    try:
        stats = place_statistics(db)
    except DiagnosticQueryError as exc:
        logger.error("place statistics aborted: %s", exc)
        raise SystemExit(1)
    finally:
        db.close()

    print("📊 Places Statistics:")
    print(f"   Total places: {stats.total:,}")
    print(f"   Active places: {stats.active:,}")
    print(f"   Inactive places: {stats.inactive:,}")


if __name__ == "__main__":
    main()
