"""
날씨 누락 장소 확인 스크립트
--------------------------
활성 상태이지만 날씨를 한 번도 가져오지 않은 장소와 국가별 누락 건수를 출력합니다.
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

from sunnomad.core.config import settings
from sunnomad.core.errors import DiagnosticQueryError
from sunnomad.core.logging import configure_logging
from sunnomad.db.session import SessionLocal
from sunnomad.services.diagnostics import (
    missing_weather_country_codes,
    places_missing_weather,
    rank_countries,
    short_id,
    tally_by_country,
)

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="날씨 데이터가 없는 장소 확인")
    parser.add_argument("--limit", type=int, default=20, help="출력할 장소 수")
    parser.add_argument("--top", type=int, default=10, help="출력할 국가 수")
    args = parser.parse_args()
    configure_logging(settings.log_level)

    print("🔍 Checking missing weather data...\n")

    db = SessionLocal()
    try:
        places = places_missing_weather(db, limit=args.limit)
        print(f"Found {len(places)} places without weather (showing first {args.limit}):\n")
        for i, p in enumerate(places, 1):
            print(f"{i}. {p.name} ({p.country_code}) - ID: {short_id(p.id)}")

        codes = missing_weather_country_codes(db)
    except DiagnosticQueryError as exc:
        logger.error("missing weather check aborted: %s", exc)
        raise SystemExit(1)
    finally:
        db.close()

    print("\n📊 Missing by country:")
    for code, count in rank_countries(tally_by_country(codes), top=args.top):
        print(f"   {code}: {count} places")

    print(f"\n🔧 Total missing: {len(codes)} places")


if __name__ == "__main__":
    main()
