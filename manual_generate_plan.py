import json
import sys

import requests

BASE_URL = "http://127.0.0.1:5000"

# --- sample payload ---
payload = {
    "destination": "京都",
    "departure": "東京",
    "startDate": "2026-11-20",
    "endDate": "2026-11-22",
    "memberCount": 3,
    "budget": 150000,
    "interests": ["紅葉", "寺社", "グルメ"],
    "travelStyle": "relaxed",
    "description": "朝はゆっくりしたい",
}

recommend_payload = {
    "destination": "京都",
    "region": "東山",
    "interests": ["歴史", "甘味"],
    "budget": "¥30,000",
    "travelStyle": "balanced",
    "groupSize": 3,
    "duration": 3,
}


def post(path: str, body: dict) -> None:
    url = f"{BASE_URL}{path}"
    print(f"➡️ Sending POST {url}")
    print(json.dumps(body, indent=2, ensure_ascii=False))

    resp = requests.post(url, json=body, timeout=120)

    print(f"\n⬅️ Status: {resp.status_code}")
    try:
        print(json.dumps(resp.json(), indent=2, ensure_ascii=False))
    except ValueError:
        print(resp.text)


def run() -> None:
    post("/api/travels/generate-plan", payload)
    if "--recommend" in sys.argv:
        post("/api/travels/ai/recommend", recommend_payload)


if __name__ == "__main__":
    run()
