"""Unit tests for the payload converter."""

from dataclasses import dataclass
from datetime import datetime

import pytest

from prologger.domain.services import PayloadConverter, stringify

MOMENT = datetime(2024, 3, 5, 7, 8, 9)


def _render(value: datetime, mask: str) -> str:
    return f"{mask}@{value:%H:%M}"


@dataclass
class Point:
    x: int
    y: int


class TestStringify:
    """Tests for stringify."""

    @pytest.mark.parametrize("value", ["text", 3, 2.5, True])
    def test_scalars_are_untouched(self, value):
        assert stringify(value) is value

    def test_none_becomes_null(self):
        assert stringify(None) == "null"

    def test_list_is_serialized(self):
        assert stringify([1, "a", None]) == '[1, "a", null]'

    def test_non_ascii_is_kept(self):
        assert stringify({"name": "José"}) == '{"name": "José"}'

    def test_unserializable_object_is_untouched(self):
        point = Point(1, 2)
        assert stringify(point) is point

    def test_circular_structure_is_untouched(self):
        items: list[object] = []
        items.append(items)
        assert stringify(items) is items


class TestPayloadConverter:
    """Tests for PayloadConverter."""

    def _converter(self, **kwargs) -> PayloadConverter:
        return PayloadConverter(render_date=_render, clock=lambda: MOMENT, **kwargs)

    def test_prepends_timestamp(self):
        assert self._converter().convert("hi", "mask") == "[mask@07:08] hi"

    def test_structured_payload_is_serialized(self):
        assert self._converter().convert({"a": 1}, "m") == '[m@07:08] {"a": 1}'

    def test_none_payload_renders_null(self):
        assert self._converter().convert(None, "m") == "[m@07:08] null"

    def test_exception_is_reduced_to_message(self):
        seen: list[BaseException] = []
        exc = ValueError("bad value")

        out = self._converter(on_exception=seen.append).convert(exc, "m")

        assert out == "[m@07:08] bad value"
        assert seen == [exc]

    def test_exception_without_hook(self):
        assert self._converter().convert(OSError("disk"), "m") == "[m@07:08] disk"

    def test_uses_mask_passed_per_call(self):
        converter = self._converter()
        assert converter.convert("x", "one").startswith("[one@")
        assert converter.convert("x", "two").startswith("[two@")
