"""Application configuration management for OCR CLI."""


import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from schemas import ImageQuality

ENV_FILE: Final[str] = ".env"
DEFAULT_BASE_URL: Final[str] = "https://ark.cn-beijing.volces.com"
DEFAULT_MODEL: Final[str] = "doubao-seed-1-6-vision-250815"
DEFAULT_TEMPERATURE: Final[float] = 1.0
DEFAULT_TIMEOUT: Final[float] = 60.0
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO

TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class VolcengineSettings:
	"""Connection and recognition settings for the Ark responses API."""
	api_key: str
	url: str = DEFAULT_BASE_URL
	model: str = DEFAULT_MODEL
	temperature: float = DEFAULT_TEMPERATURE
	thinking: bool = False
	image_quality: ImageQuality = ImageQuality.MEDIUM
	reject_high_quality: bool = False
	keep_empty_lines: bool = False
	timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class AppConfig:
	"""Aggregate configuration for the CLI runtime."""
	volcengine: VolcengineSettings | None
	output_dir: Path
	log_level: int = DEFAULT_LOG_LEVEL


def load_config() -> AppConfig:
	"""Load environment-based configuration values.

	Returns:
		AppConfig: Parsed configuration with credentials when available.
	"""
	load_dotenv(ENV_FILE)
	output_dir = Path(os.getenv("OCR_OUTPUT_DIR", "outputs")).resolve()
	log_level = getattr(logging, os.getenv("OCR_LOG_LEVEL", "INFO").upper(), DEFAULT_LOG_LEVEL)

	return AppConfig(
		volcengine=_load_volcengine_settings(),
		output_dir=output_dir,
		log_level=log_level if isinstance(log_level, int) else DEFAULT_LOG_LEVEL,
	)


def configure_logging(level: int = DEFAULT_LOG_LEVEL) -> None:
	"""Configure the root logger for the application."""
	logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def _env_flag(name: str, default: bool = False) -> bool:
	value = os.getenv(name)
	if value is None:
		return default
	return value.strip().lower() in TRUE_VALUES


def _env_float(name: str, default: float) -> float:
	value = os.getenv(name)
	if not value:
		return default
	try:
		return float(value)
	except ValueError as exc:
		raise ValueError(f"{name} must be a number, got {value!r}") from exc


def _load_volcengine_settings() -> VolcengineSettings | None:
	"""Load Ark settings from the environment if an API key is available."""
	api_key = os.getenv("ARK_API_KEY")
	if not api_key:
		return None
	return VolcengineSettings(
		api_key=api_key,
		url=os.getenv("ARK_BASE_URL", DEFAULT_BASE_URL),
		model=os.getenv("ARK_MODEL", DEFAULT_MODEL),
		temperature=_env_float("ARK_TEMPERATURE", DEFAULT_TEMPERATURE),
		thinking=_env_flag("ARK_THINKING"),
		image_quality=ImageQuality(os.getenv("OCR_IMAGE_QUALITY", ImageQuality.MEDIUM.value).lower()),
		reject_high_quality=_env_flag("OCR_REJECT_HIGH_QUALITY"),
		keep_empty_lines=_env_flag("OCR_KEEP_EMPTY_LINES"),
		timeout=_env_float("ARK_TIMEOUT", DEFAULT_TIMEOUT),
	)
