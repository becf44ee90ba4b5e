"""Pydantic schemas for normalized OCR responses."""


from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ImageQuality(str, Enum):
	"""Image quality level requested by the caller."""
	LOW = "low"
	MEDIUM = "medium"
	HIGH = "high"

	@property
	def mime_type(self) -> str:
		return IMAGE_MIME_TYPES[self]


IMAGE_MIME_TYPES: dict[ImageQuality, str] = {
	ImageQuality.LOW: "image/jpeg",
	ImageQuality.MEDIUM: "image/png",
	ImageQuality.HIGH: "image/bmp",
}


class BoxPoint(BaseModel):
	"""One vertex of a bounding polygon in image pixel coordinates."""
	model_config = ConfigDict(frozen=True)

	x: float
	y: float


class OcrContent(BaseModel):
	"""A single recognized text fragment with an optional bounding polygon."""
	text: str
	box_points: list[BoxPoint] | None = None


class OcrResult(BaseModel):
	"""Normalized OCR output for console display and persistence."""
	contents: list[OcrContent] = Field(default_factory=list)
	model: str | None = None
	image_path: str | None = None
	raw: dict | None = None

	@property
	def full_text(self) -> str:
		return "\n".join(content.text for content in self.contents)


class PromptMessage(BaseModel):
	"""One templated chat message."""
	role: str
	content: str


class Prompt(BaseModel):
	"""Named prompt template sent along with the image."""
	name: str
	messages: list[PromptMessage]
	enabled: bool = True

	def render(self, target: str) -> list[PromptMessage]:
		"""Return a copy of the messages with ``$target`` substituted."""
		return [
			PromptMessage(role=message.role, content=message.content.replace("$target", target))
			for message in self.messages
		]
