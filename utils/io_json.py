"""Persistence helpers for OCR results and saved API responses."""
from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path

from schemas import OcrResult

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
UNSAFE_NAME_CHARS = re.compile(r"[^\w.-]+")

def result_payload(result: OcrResult) -> dict:
	"""Serialize a result with its joined text for display and storage."""
	payload = result.model_dump()
	payload["full_text"] = result.full_text
	return payload

def save_result(result: OcrResult, output_dir: Path, label: str) -> Path:
	"""Write the result as ``ocr_<label>_<utc timestamp>.json`` and return the path."""
	stamp = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
	safe_label = UNSAFE_NAME_CHARS.sub("_", label).strip("_") or "result"
	output_dir.mkdir(parents=True, exist_ok=True)
	path = output_dir / f"ocr_{safe_label}_{stamp}.json"
	path.write_text(json.dumps(result_payload(result), ensure_ascii=False, indent=2), encoding="utf-8")
	return path

def read_response_body(path: str | Path) -> str:
	"""Read a saved raw API response body."""
	source = Path(path).expanduser().resolve()
	if not source.is_file():
		raise FileNotFoundError(f"Response file not found: {source}")
	return source.read_text(encoding="utf-8")
