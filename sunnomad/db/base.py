"""Declarative bases."""

from sqlalchemy.orm import declarative_base

# 이 저장소가 소유하는 테이블 (profiles, saved_places, posts)
Base = declarative_base()

# 외부 날씨 스키마가 소유하는 테이블/뷰. 읽기 전용이며 생성하지 않음.
ExternalBase = declarative_base()
