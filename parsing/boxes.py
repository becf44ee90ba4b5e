"""Recognizers for the bounding-box shapes vision models emit."""


import math
from typing import Any, Callable

from schemas import BoxPoint

VERTEX_KEYS: tuple[str, ...] = ("topLeft", "topRight", "bottomRight", "bottomLeft")


def coerce_float(value: Any) -> float | None:
	"""Coerce a JSON number or numeric string into a finite float.

	Booleans, non-numeric strings and non-finite values are rejected.
	"""
	if isinstance(value, bool):
		return None
	if isinstance(value, str) and "_" in value:
		return None
	if not isinstance(value, (int, float, str)):
		return None
	try:
		result = float(value)
	except (ValueError, OverflowError):
		return None
	if not math.isfinite(result):
		return None
	return result


def read_point_array(value: Any) -> BoxPoint | None:
	"""Read ``[x, y, ...]`` as a point; extra coordinates are ignored."""
	if not isinstance(value, list) or len(value) < 2:
		return None
	x = coerce_float(value[0])
	y = coerce_float(value[1])
	if x is None or y is None:
		return None
	return BoxPoint(x=x, y=y)


def read_point_object(value: Any) -> BoxPoint | None:
	"""Read ``{"x": .., "y": ..}`` as a point."""
	if not isinstance(value, dict) or "x" not in value or "y" not in value:
		return None
	x = coerce_float(value["x"])
	y = coerce_float(value["y"])
	if x is None or y is None:
		return None
	return BoxPoint(x=x, y=y)


def read_vertex(value: Any) -> BoxPoint | None:
	if isinstance(value, list):
		return read_point_array(value)
	return read_point_object(value)


def _point_object_box(value: dict[str, Any]) -> list[BoxPoint] | None:
	point = read_point_object(value)
	return [point] if point is not None else None


def _rect_box(value: dict[str, Any]) -> list[BoxPoint] | None:
	edges = [coerce_float(value.get(key)) for key in ("left", "top", "right", "bottom")]
	if any(edge is None for edge in edges):
		return None
	left, top, right, bottom = edges
	return [
		BoxPoint(x=left, y=top),
		BoxPoint(x=right, y=top),
		BoxPoint(x=right, y=bottom),
		BoxPoint(x=left, y=bottom),
	]


def _named_vertex_box(value: dict[str, Any]) -> list[BoxPoint] | None:
	points: list[BoxPoint] = []
	for key in VERTEX_KEYS:
		if key not in value:
			return None
		point = read_vertex(value[key])
		if point is None:
			return None
		points.append(point)
	return points


OBJECT_RECOGNIZERS: tuple[Callable[[dict[str, Any]], list[BoxPoint] | None], ...] = (
	_point_object_box,
	_rect_box,
	_named_vertex_box,
)


def read_object_box(value: dict[str, Any]) -> list[BoxPoint] | None:
	"""Try each object recognizer in precedence order."""
	for recognizer in OBJECT_RECOGNIZERS:
		points = recognizer(value)
		if points:
			return points
	return None


def read_array_box(value: list[Any]) -> list[BoxPoint] | None:
	"""Read a list of points, or a flat coordinate list paired up as (x, y)."""
	points: list[BoxPoint] = []
	numbers: list[float] = []
	for item in value:
		if isinstance(item, list):
			point = read_point_array(item)
			if point is not None:
				points.append(point)
			continue
		if isinstance(item, dict):
			point = read_point_object(item)
			if point is not None:
				points.append(point)
			continue
		number = coerce_float(item)
		if number is not None:
			numbers.append(number)

	# Loose numbers are paired only when no point was recognized.
	if not points and len(numbers) >= 2:
		iterator = iter(numbers)
		points = [BoxPoint(x=x, y=y) for x, y in zip(iterator, iterator)]
	return points or None


def read_box(value: Any) -> list[BoxPoint] | None:
	"""Recognize a bounding box in any supported shape.

	Returns the points in source order, or in TL, TR, BR, BL order for
	rectangles. ``None`` means no shape matched; partial boxes are never
	returned.
	"""
	if isinstance(value, dict):
		return read_object_box(value)
	if isinstance(value, list):
		return read_array_box(value)
	return None
