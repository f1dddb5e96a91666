"""
도시 존재 여부 확인 스크립트
--------------------------
places_with_latest_weather 뷰에서 도시 이름으로 검색해 최신 날씨/인구/점수를 출력합니다.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

BACKEND_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(BACKEND_ROOT / ".env")

# 패키지 import를 위해 경로 추가
sys.path.insert(0, str(BACKEND_ROOT))

from sqlalchemy.orm import Session

from sunnomad.core.config import settings
from sunnomad.core.errors import DiagnosticQueryError
from sunnomad.core.logging import configure_logging
from sunnomad.db.session import SessionLocal
from sunnomad.services.diagnostics import find_places_by_name, format_population

logger = logging.getLogger(__name__)

DEFAULT_CITIES = ("vancouver", "seattle")


def check_city(db: Session, city: str, limit: int) -> int:
    """Print matches for one city; return how many were found."""
    places = find_places_by_name(db, city, limit=limit)
    print(f"📍 {city.title()}:")
    if not places:
        print("   ❌ Not found!")
        return 0
    for p in places:
        print(
            f"   ✅ {p.name}: {p.temperature}°C, "
            f"Pop: {format_population(p.population)}, Score: {p.attractiveness_score}"
        )
    return len(places)


def main() -> None:
    parser = argparse.ArgumentParser(description="도시 이름으로 장소/날씨 데이터 확인")
    parser.add_argument(
        "--city",
        action="append",
        dest="cities",
        help="검색할 도시 이름 (여러 번 지정 가능, 기본: vancouver, seattle)",
    )
    parser.add_argument("--limit", type=int, default=5, help="도시별 최대 출력 개수")
    args = parser.parse_args()
    configure_logging(settings.log_level)

    cities = args.cities or list(DEFAULT_CITIES)
    print(f"🔍 Checking for {', '.join(c.title() for c in cities)}...\n")

    db = SessionLocal()
    try:
        for city in cities:
            check_city(db, city, args.limit)
            print("")
    except DiagnosticQueryError as exc:
        logger.error("city check aborted: %s", exc)
        raise SystemExit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
