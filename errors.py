"""Exception types raised by the OCR client and response parser."""


class OcrError(Exception):
	"""Base class for OCR failures surfaced to callers."""


class DecodeError(OcrError):
	"""Raised when no model text can be recovered from a response body."""

	def __init__(self, raw_response: str, message: str = "Failed to decode model response") -> None:
		self.raw_response = raw_response
		super().__init__(f"{message}: {raw_response}")


class OcrRequestError(OcrError):
	"""Raised when the OCR request cannot be built or sent."""

	def __init__(self, message: str, status_code: int | None = None) -> None:
		self.status_code = status_code
		super().__init__(message)

	@property
	def retryable(self) -> bool:
		"""Whether a later attempt may succeed."""
		return self.status_code is None or self.status_code == 429 or self.status_code >= 500
