# submission_utils/manifest.py
import json
from .models import ScanResult


def save_manifest(result: ScanResult, out_json_path: str) -> None:
    with open(out_json_path, "w", encoding="utf-8") as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)


def load_manifest(json_path: str) -> ScanResult:
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ScanResult.from_dict(data)
