"""
마이그레이션 검증 스크립트
------------------------
활성 장소 수 대비 현재 날씨/예보 행 수를 비교해 커버리지를 출력합니다.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
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
from sunnomad.services.diagnostics import FORECAST_DAYS, WEATHER_SOURCE, migration_coverage

logger = logging.getLogger(__name__)


def _percent(value: float | None) -> str:
    return f"{value:.1f}%" if value is not None else "N/A"


def _minutes_since(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return round((datetime.now(timezone.utc) - moment).total_seconds() / 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="날씨 데이터 마이그레이션 검증")
    parser.add_argument("--source", default=WEATHER_SOURCE, help="data_source 값")
    parser.add_argument("--forecast-days", type=int, default=FORECAST_DAYS, help="장소당 예보 일수")
    args = parser.parse_args()
    configure_logging(settings.log_level)

    db = SessionLocal()
    try:
        report = migration_coverage(db, source=args.source, forecast_days=args.forecast_days)
    except DiagnosticQueryError as exc:
        logger.error("migration verification aborted: %s", exc)
        raise SystemExit(1)
    finally:
        db.close()

    print("=" * 60)
    print("Migration Verification")
    print("=" * 60)
    print("\n📊 Database Status:")
    print(f"   Places (active):     {report.active_places:,}")
    print(f"   Weather data:        {report.weather_rows:,}")
    print(f"   Forecast data:       {report.forecast_rows:,}")
    if report.latest_weather_at is not None:
        print(f"   Latest update:       {_minutes_since(report.latest_weather_at)} minutes ago")

    print("\n✅ Expected Results:")
    print(f"   Weather data:        ~{report.active_places:,} rows (1 per place)")
    print(
        f"   Forecast data:       ~{report.expected_forecast_rows:,} rows "
        f"({report.forecast_days} days per place)"
    )

    print("\n📈 Coverage:")
    print(f"   Weather coverage:    {_percent(report.weather_coverage)}")
    print(f"   Forecast coverage:   {_percent(report.forecast_coverage)}")


if __name__ == "__main__":
    main()
