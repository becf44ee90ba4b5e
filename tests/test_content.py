"""Tests for normalizing model text into OCR items."""
from __future__ import annotations

from parsing.content import normalize_content, read_item, strip_code_fence


def _pairs(content) -> list[tuple[float, float]] | None:
	if content.box_points is None:
		return None
	return [(point.x, point.y) for point in content.box_points]


def test_fenced_array_with_box_points() -> None:
	"""A fenced JSON array is unwrapped and its boxes are kept."""
	text = "```json\n[{\"text\":\"Hi\",\"box_points\":[[0,0],[10,0],[10,5],[0,5]]}]\n```"
	contents = normalize_content(text)
	assert len(contents) == 1
	assert contents[0].text == "Hi"
	assert _pairs(contents[0]) == [(0, 0), (10, 0), (10, 5), (0, 5)]


def test_inline_rectangle_on_item_object() -> None:
	"""Rectangle edges on the item itself become the box."""
	contents = normalize_content("{\"left\":1,\"top\":2,\"right\":5,\"bottom\":9,\"text\":\"X\"}")
	assert len(contents) == 1
	assert contents[0].text == "X"
	assert _pairs(contents[0]) == [(1, 2), (5, 2), (5, 9), (1, 9)]


def test_plain_text_lines() -> None:
	"""Non-JSON text is split into lines without boxes."""
	contents = normalize_content("line one\nline two")
	assert [content.text for content in contents] == ["line one", "line two"]
	assert all(content.box_points is None for content in contents)


def test_plain_text_is_a_fixed_point() -> None:
	"""Normalizing the joined fallback output gives the same lines again."""
	first = normalize_content("alpha\r\nbeta\ngamma")
	second = normalize_content("\n".join(content.text for content in first))
	assert [content.text for content in first] == ["alpha", "beta", "gamma"]
	assert [content.text for content in second] == [content.text for content in first]


def test_empty_line_policy() -> None:
	"""Blank lines are dropped by default and kept on request."""
	text = "a\r\n\r\nb\n"
	assert [content.text for content in normalize_content(text)] == ["a", "b"]
	assert [content.text for content in normalize_content(text, keep_empty_lines=True)] == ["a", "", "b", ""]


def test_items_without_text_are_omitted() -> None:
	"""Items lacking a recognized text field do not appear in the output."""
	text = "[{\"text\":\"one\"},{\"label\":\"nope\"},{\"value\":\"two\"},{\"text\":\"   \"},42,\"three\"]"
	assert [content.text for content in normalize_content(text)] == ["one", "two", "three"]


def test_three_corner_vertices_yield_no_box() -> None:
	"""An item with an incomplete named-vertex box keeps its text only."""
	text = "[{\"text\":\"t\",\"boundingBox\":{\"topLeft\":[0,0],\"topRight\":[1,0],\"bottomRight\":[1,1]}}]"
	contents = normalize_content(text)
	assert contents[0].text == "t"
	assert contents[0].box_points is None


def test_object_with_item_array() -> None:
	"""The object itself comes first, then the first recognized item array."""
	text = "{\"text\":\"title\",\"lines\":[\"l1\",{\"content\":\"l2\",\"bbox\":[1,2,3,4]}],\"data\":\"x\",\"blocks\":[\"ignored\"]}"
	contents = normalize_content(text)
	assert [content.text for content in contents] == ["title", "l1", "l2"]
	assert _pairs(contents[2]) == [(1, 2), (3, 4)]


def test_object_without_items_falls_back_to_lines() -> None:
	"""A JSON object with nothing recognizable is treated as plain text."""
	contents = normalize_content("{\"status\": \"ok\"}")
	assert [content.text for content in contents] == ["{\"status\": \"ok\"}"]


def test_malformed_json_falls_back_to_lines() -> None:
	"""Broken JSON degrades to line splitting instead of raising."""
	contents = normalize_content("[{\"text\": \"a\"\n\"b\"")
	assert [content.text for content in contents] == ["[{\"text\": \"a\"", "\"b\""]


def test_fenced_plain_text_is_unwrapped() -> None:
	"""Fenced prose is split after the fence lines are removed."""
	contents = normalize_content("```\nfirst\nsecond\n```")
	assert [content.text for content in contents] == ["first", "second"]


def test_strip_code_fence_edge_cases() -> None:
	"""Malformed fences leave the text unchanged."""
	assert strip_code_fence("no fence") == "no fence"
	assert strip_code_fence("```json [1]```") == "```json [1]```"
	assert strip_code_fence("```json\n[1]") == "```json\n[1]"
	assert strip_code_fence("  ```json\n [1] \n```  ") == "[1]"


def test_read_item_text_priority() -> None:
	"""The first string-typed text field is used and trimmed."""
	item = read_item({"text": 5, "content": "  c  ", "value": "v"})
	assert item is not None
	assert item.text == "c"
	assert read_item({"text": " ", "content": "c"}) is None
	assert read_item(None) is None


def test_first_box_key_is_used_even_when_unreadable() -> None:
	"""Only the first present box field is consulted."""
	item = read_item({"text": "t", "box": "n/a", "bbox": [0, 0, 1, 1]})
	assert item is not None
	assert item.box_points is None


def test_empty_input() -> None:
	"""Empty text yields no items."""
	assert normalize_content("") == []
	assert normalize_content("", keep_empty_lines=True)[0].text == ""


def test_oversized_coordinate_drops_only_the_box() -> None:
	"""A coordinate too large for a float leaves the item without a box."""
	contents = normalize_content("[{\"text\":\"a\",\"box\":[1" + "0" * 400 + ",1]}]")
	assert [content.text for content in contents] == ["a"]
	assert contents[0].box_points is None


def test_deeply_nested_json_falls_back_to_lines() -> None:
	"""JSON nested beyond the parser's limit is treated as plain text."""
	text = "[" * 100000 + "]" * 100000
	contents = normalize_content(text)
	assert len(contents) == 1
	assert contents[0].text == text
