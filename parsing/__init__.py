"""Response normalization: envelope extraction followed by content parsing."""


import logging

from parsing.content import normalize_content
from parsing.envelope import extract_response_text, load_envelope
from schemas import OcrContent

logger = logging.getLogger(__name__)


def parse_ocr_response(raw_response: str, keep_empty_lines: bool = False) -> list[OcrContent]:
	"""Recover OCR items from a raw API response body.

	Raises:
		DecodeError: The body carried no recognizable model text.
	"""
	root = load_envelope(raw_response)
	text = extract_response_text(root, raw_response)
	contents = normalize_content(text, keep_empty_lines=keep_empty_lines)
	logger.debug("Normalized %s OCR items from %s characters of model text", len(contents), len(text))
	return contents


__all__ = ["extract_response_text", "load_envelope", "normalize_content", "parse_ocr_response"]
