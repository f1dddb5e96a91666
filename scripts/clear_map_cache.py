"""
지도 캐시 초기화 안내
-------------------
앱이 DB에서 목적지를 새로 불러오도록 캐시를 비우는 방법을 출력합니다.
서버 쪽에서 할 수 있는 작업은 없으므로 DB 접속은 하지 않습니다.
"""

MAP_CACHE_KEY = "mapDestinationsCache"


def main() -> None:
    print("💡 To clear the map cache:")
    print("")
    print("Option 1: Delete app from simulator/device and reinstall")
    print("")
    print("Option 2: Add this to your app (one-time):")
    print("")
    print("  import AsyncStorage from '@react-native-async-storage/async-storage';")
    print(f"  await AsyncStorage.removeItem('{MAP_CACHE_KEY}');")
    print("")
    print("Option 3: Force reload destinations by changing radius")
    print("  → In app: Change radius from 2000 to 2050, then back to 2000")
    print("")


if __name__ == "__main__":
    main()
