"""Volcengine Ark vision-model OCR provider implementation."""


import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable
from urllib.parse import urlsplit, urlunsplit

import httpx

from config import DEFAULT_MODEL, VolcengineSettings
from errors import OcrRequestError
from parsing import load_envelope, parse_ocr_response
from prompts import DEFAULT_PROMPT, language_name
from schemas import ImageQuality, OcrResult, Prompt
from utils.image_io import read_image_base64

RESPONSES_PATH = "/api/v3/responses"
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0


def build_endpoint(url: str) -> str:
	"""Append the responses path when the configured URL is a bare host."""
	parts = urlsplit(url.strip())
	if parts.path in ("", "/"):
		parts = parts._replace(path=RESPONSES_PATH)
	return urlunsplit(parts)


def clamp_temperature(value: float) -> float:
	return min(max(value, MIN_TEMPERATURE), MAX_TEMPERATURE)


def select_prompt(prompts: list[Prompt]) -> Prompt:
	"""Return the first enabled prompt."""
	for prompt in prompts:
		if prompt.enabled:
			return prompt
	raise OcrRequestError("No enabled prompt is configured.")


@dataclass
class VolcengineOcrClient:
	"""Client wrapper around the Ark responses API for image OCR."""

	settings: VolcengineSettings
	prompts: list[Prompt] = field(default_factory=lambda: [DEFAULT_PROMPT])
	retries: int = 3
	backoff: float = 1.5
	http_client: httpx.Client | None = None

	def __post_init__(self) -> None:
		self._logger = logging.getLogger(self.__class__.__name__)
		self._owns_http_client = self.http_client is None
		if self.http_client is None:
			self.http_client = httpx.Client(timeout=self.settings.timeout)

	def close(self) -> None:
		"""Close the HTTP client if this instance created it."""
		if self._owns_http_client:
			self.http_client.close()

	def __enter__(self) -> "VolcengineOcrClient":
		return self

	def __exit__(self, *exc_info: Any) -> None:
		self.close()

	def recognize(
		self,
		image_path: Path,
		language: str = "auto",
		image_quality: ImageQuality | None = None,
	) -> OcrResult:
		quality = image_quality or self.settings.image_quality
		if quality is ImageQuality.HIGH and self.settings.reject_high_quality:
			raise OcrRequestError("High image quality is not supported by this deployment.")
		payload = self.build_payload(read_image_base64(image_path), quality.mime_type, language)
		endpoint = build_endpoint(self.settings.url)
		body = self._execute(lambda: self._post(endpoint, payload))
		contents = parse_ocr_response(body, keep_empty_lines=self.settings.keep_empty_lines)
		self._logger.info("Recognized %s text items from %s", len(contents), image_path)
		return OcrResult(
			contents=contents,
			model=payload["model"],
			image_path=str(image_path),
			raw=self._to_dict(body),
		)

	def build_payload(self, image_b64: str, mime_type: str, language: str) -> dict[str, Any]:
		"""Build the responses request body for one image."""
		messages = select_prompt(self.prompts).render(language_name(language))
		if not messages:
			raise OcrRequestError("The selected prompt has no messages.")
		*history, user_prompt = messages

		inputs: list[dict[str, Any]] = [
			{
				"role": message.role,
				"content": [{"type": "input_text", "text": message.content}],
			}
			for message in history
		]
		inputs.append(
			{
				"role": "user",
				"content": [
					{"type": "input_text", "text": user_prompt.content},
					{"type": "input_image", "image_url": f"data:{mime_type};base64,{image_b64}"},
				],
			}
		)
		return {
			"model": self.settings.model.strip() or DEFAULT_MODEL,
			"input": inputs,
			"temperature": clamp_temperature(self.settings.temperature),
			"thinking": {"type": "enabled" if self.settings.thinking else "disabled"},
		}

	def _post(self, endpoint: str, payload: dict[str, Any]) -> str:
		try:
			response = self.http_client.post(
				endpoint,
				json=payload,
				headers={"Authorization": f"Bearer {self.settings.api_key}"},
			)
		except httpx.HTTPError as exc:
			raise OcrRequestError(f"Ark request failed: {type(exc).__name__}: {exc}") from exc
		if response.status_code >= 400:
			raise OcrRequestError(
				f"Ark request failed with HTTP {response.status_code}: {response.text[:1000]}",
				status_code=response.status_code,
			)
		return response.text

	def _execute(self, call: Callable[[], str]) -> str:
		for attempt in range(1, self.retries + 1):
			try:
				return call()
			except OcrRequestError as exc:
				wait = self.backoff ** attempt
				self._logger.warning("Ark OCR call failed (attempt %s/%s): %s", attempt, self.retries, exc)
				if attempt == self.retries or not exc.retryable:
					raise
				time.sleep(wait)
		raise OcrRequestError("Ark OCR call was not attempted.")

	def _to_dict(self, body: str) -> dict[str, Any] | None:
		raw = load_envelope(body)
		return raw if isinstance(raw, dict) else None
