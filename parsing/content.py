"""Normalize model text into OCR items, falling back to plain lines."""


import json
import logging
from typing import Any

from parsing.boxes import read_box, read_object_box
from schemas import OcrContent

FENCE = "```"
TEXT_KEYS: tuple[str, ...] = ("text", "content", "value", "line")
BOX_KEYS: tuple[str, ...] = (
	"box_points",
	"boxPoints",
	"box",
	"points",
	"bbox",
	"boundingBox",
	"bounding_box",
	"box_2d",
)
ARRAY_KEYS: tuple[str, ...] = ("data", "items", "results", "result", "ocr", "lines", "blocks", "contents")

logger = logging.getLogger(__name__)


def strip_code_fence(text: str) -> str:
	"""Return the body of a Markdown code fence, or the text unchanged."""
	trimmed = text.strip()
	if not trimmed.startswith(FENCE):
		return text
	first_newline = trimmed.find("\n")
	last_fence = trimmed.rfind(FENCE)
	if first_newline < 0 or last_fence <= first_newline:
		return text
	return trimmed[first_newline + 1:last_fence].strip()


def _extract_text(node: dict[str, Any]) -> str | None:
	for key in TEXT_KEYS:
		value = node.get(key)
		if isinstance(value, str):
			return value
	return None


def _extract_box(node: dict[str, Any]):
	for key in BOX_KEYS:
		if key in node:
			return read_box(node[key])
	# Items may carry the rectangle or vertices inline.
	return read_object_box(node)


def read_item(value: Any) -> OcrContent | None:
	"""Read one OCR item from a JSON string or object."""
	if isinstance(value, str):
		text = value.strip()
		return OcrContent(text=text) if text else None
	if not isinstance(value, dict):
		return None
	text = _extract_text(value)
	if text is None or not text.strip():
		return None
	return OcrContent(text=text.strip(), box_points=_extract_box(value))


def _read_items(values: list[Any]) -> list[OcrContent]:
	items = (read_item(value) for value in values)
	return [item for item in items if item is not None]


def _find_item_array(node: dict[str, Any]) -> list[Any] | None:
	for key in ARRAY_KEYS:
		value = node.get(key)
		if isinstance(value, list):
			return value
	return None


def parse_structured(payload: str) -> list[OcrContent]:
	"""Decode a JSON array or object of OCR items; empty when nothing matches."""
	if not payload.startswith(("{", "[")):
		return []
	try:
		root = json.loads(payload)
	except (ValueError, RecursionError):
		logger.debug("Model text looked like JSON but failed to parse")
		return []

	if isinstance(root, list):
		return _read_items(root)
	if not isinstance(root, dict):
		return []

	contents: list[OcrContent] = []
	single = read_item(root)
	if single is not None:
		contents.append(single)
	array = _find_item_array(root)
	if array is not None:
		contents.extend(_read_items(array))
	return contents


def split_lines(text: str, keep_empty_lines: bool = False) -> list[OcrContent]:
	"""Emit one item per line, trimming a trailing carriage return."""
	lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
	if not keep_empty_lines:
		lines = [line for line in lines if line.strip()]
	return [OcrContent(text=line) for line in lines]


def normalize_content(text: str, keep_empty_lines: bool = False) -> list[OcrContent]:
	"""Turn the model's text into OCR items.

	Structured JSON items are preferred; when none can be read the text is
	split into lines instead. This never raises.

	Args:
		text: Text generated by the model, possibly fenced.
		keep_empty_lines: Keep blank lines in the plain-text fallback so the
			output mirrors the line count exactly.

	Returns:
		list[OcrContent]: Items in the order the model emitted them.
	"""
	payload = strip_code_fence(text)
	contents = parse_structured(payload.strip())
	if contents:
		return contents
	logger.debug("No structured OCR items found, splitting text into lines")
	return split_lines(payload, keep_empty_lines=keep_empty_lines)
