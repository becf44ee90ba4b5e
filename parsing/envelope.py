"""Locate the generated text inside an API response envelope."""


import json
from typing import Any

from errors import DecodeError


def load_envelope(raw_response: str) -> Any:
	"""Parse the response body, raising DecodeError when it is not JSON."""
	try:
		return json.loads(raw_response)
	except (ValueError, RecursionError) as exc:
		raise DecodeError(raw_response, "Response body is not valid JSON") from exc


def _output_text(root: dict[str, Any]) -> str | None:
	value = root.get("output_text")
	return value if isinstance(value, str) else None


def _is_skipped(item: dict[str, Any]) -> bool:
	item_type = item.get("type")
	if item_type == "reasoning":
		return True
	if item_type == "message":
		role = item.get("role")
		return isinstance(role, str) and role != "assistant"
	return False


def _output_blocks(root: dict[str, Any]) -> str | None:
	output = root.get("output")
	if not isinstance(output, list):
		return None
	parts: list[str] = []
	for item in output:
		if not isinstance(item, dict) or _is_skipped(item):
			continue
		content = item.get("content")
		if not isinstance(content, list):
			continue
		for block in content:
			if not isinstance(block, dict):
				continue
			text = block.get("text")
			if isinstance(text, str):
				parts.append(text)
	return "".join(parts) or None


def _choices(root: dict[str, Any]) -> str | None:
	choices = root.get("choices")
	if not isinstance(choices, list) or not choices:
		return None
	first = choices[0]
	message = first.get("message") if isinstance(first, dict) else None
	content = message.get("content") if isinstance(message, dict) else None
	return content if isinstance(content, str) else None


ENVELOPE_READERS = (_output_text, _output_blocks, _choices)


def extract_response_text(root: Any, raw_response: str) -> str:
	"""Return the model's generated text from a parsed response envelope.

	Three envelope shapes are tried in order: a direct ``output_text``
	field, a ``responses``-style ``output`` array of message blocks, and a
	chat-completion ``choices`` array.

	Raises:
		DecodeError: No envelope shape matched, or the first one that
			matched carried an empty string.
	"""
	if isinstance(root, dict):
		for reader in ENVELOPE_READERS:
			text = reader(root)
			if text is None:
				continue
			if text:
				return text
			break
	raise DecodeError(raw_response)
