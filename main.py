"""Command-line interface for vision-model OCR."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

from config import AppConfig, configure_logging, load_config
from parsing import parse_ocr_response
from providers.volcengine_ocr import VolcengineOcrClient
from schemas import ImageQuality, OcrResult
from utils.image_io import ensure_image_path
from utils.io_json import read_response_body, result_payload, save_result


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(description="Vision-model OCR CLI")
	source = parser.add_mutually_exclusive_group(required=True)
	source.add_argument("--image", help="Path to the image file to recognize")
	source.add_argument("--response", help="Path to a saved raw API response to normalize offline")
	parser.add_argument("--language", default="auto", help="Language code of the text in the image")
	parser.add_argument(
		"--quality",
		choices=[quality.value for quality in ImageQuality],
		default=None,
		help="Image quality override (defaults to OCR_IMAGE_QUALITY)",
	)
	parser.add_argument("--keep-empty-lines", action="store_true", help="Keep blank lines in plain-text results")
	parser.add_argument("--outdir", default=None, help="Directory to store JSON outputs")
	return parser.parse_args(argv)


def run(args: argparse.Namespace, config: AppConfig) -> dict[str, Any]:
	"""Execute OCR processing for the provided arguments."""
	output_dir = Path(args.outdir).expanduser().resolve() if args.outdir else config.output_dir
	settings = config.volcengine
	keep_empty_lines = args.keep_empty_lines or bool(settings and settings.keep_empty_lines)

	if args.response:
		body = read_response_body(args.response)
		result = OcrResult(
			contents=parse_ocr_response(body, keep_empty_lines=keep_empty_lines),
			raw=json.loads(body),
		)
		label = "response"
	else:
		if not settings:
			raise RuntimeError("ARK_API_KEY is not configured.")
		image_path = ensure_image_path(args.image)
		if args.keep_empty_lines:
			settings = replace(settings, keep_empty_lines=True)
		quality = ImageQuality(args.quality) if args.quality else None
		with VolcengineOcrClient(settings) as client:
			result = client.recognize(image_path=image_path, language=args.language, image_quality=quality)
		label = image_path.stem

	json_payload = result_payload(result)
	output_path = save_result(result, output_dir, label)
	logging.info("Saved OCR output to %s", output_path)
	print(json.dumps(json_payload, ensure_ascii=False, indent=2))
	return json_payload


def main(argv: list[str] | None = None) -> int:
	"""Entry point for the CLI application."""
	config = load_config()
	configure_logging(config.log_level)
	try:
		args = parse_arguments(argv)
		run(args, config)
	except Exception as exc:  # noqa: BLE001
		logging.exception("OCR processing failed: %s", exc)
		return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
