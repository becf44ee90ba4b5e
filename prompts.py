"""Default prompt and language names used when building OCR requests."""


from typing import Final

from schemas import Prompt, PromptMessage

AUTO_DETECT: Final[str] = "Requires you to identify automatically"

LANGUAGE_NAMES: dict[str, str] = {
	"auto": AUTO_DETECT,
	"zh-cn": "Simplified Chinese",
	"zh-tw": "Traditional Chinese",
	"yue": "Cantonese",
	"en": "English",
	"ja": "Japanese",
	"ko": "Korean",
	"fr": "French",
	"es": "Spanish",
	"ru": "Russian",
	"de": "German",
	"it": "Italian",
	"tr": "Turkish",
	"pt-pt": "Portuguese",
	"pt-br": "Portuguese",
	"vi": "Vietnamese",
	"id": "Indonesian",
	"th": "Thai",
	"ms": "Malay",
	"ar": "Arabic",
	"hi": "Hindi",
	"mn-cy": "Mongolian",
	"mn-mo": "Mongolian",
	"km": "Central Khmer",
	"nb": "Norwegian Bokmål",
	"nn": "Norwegian Nynorsk",
	"fa": "Persian",
	"sv": "Swedish",
	"pl": "Polish",
	"nl": "Dutch",
	"uk": "Ukrainian",
}

DEFAULT_PROMPT: Final[Prompt] = Prompt(
	name="ocr",
	messages=[
		PromptMessage(
			role="system",
			content=(
				"You are an OCR engine. Recognize all text in the image, which is written in $target. "
				"Return ONLY a JSON array. Each element must be an object with a \"text\" string and a "
				"\"box_points\" array of four [x, y] pixel coordinates ordered top-left, top-right, "
				"bottom-right, bottom-left. Keep reading order. No markdown, no explanations."
			),
		),
		PromptMessage(role="user", content="Recognize the text in this image."),
	],
)


def language_name(code: str) -> str:
	"""Map a language code to the name used inside prompts."""
	return LANGUAGE_NAMES.get(code.strip().lower(), AUTO_DETECT)
