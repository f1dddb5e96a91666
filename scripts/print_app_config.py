"""
앱 설정 출력 스크립트
-------------------
환경 변수를 반영한 앱 매니페스트(expo config)를 JSON으로 출력합니다.
"""

import argparse
import json
import sys
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

BACKEND_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(BACKEND_ROOT / ".env")

# 패키지 import를 위해 경로 추가
sys.path.insert(0, str(BACKEND_ROOT))

from sunnomad.core.app_manifest import build_app_manifest


def main() -> None:
    parser = argparse.ArgumentParser(description="앱 매니페스트 출력")
    parser.add_argument("--show-secrets", action="store_true", help="API 키를 마스킹하지 않고 출력")
    args = parser.parse_args()

    manifest = build_app_manifest()
    document = manifest.to_expo_dict(mask_secrets=not args.show_secrets)
    print(json.dumps(document, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
