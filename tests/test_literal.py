"""Tests for Ruby literal rendering."""

from datetime import date, datetime, timedelta, timezone

import pytest

from buildstamp.ivars.literal import LiteralRenderer, UnrepresentableValueError


@pytest.fixture
def renderer():
    return LiteralRenderer()


class TestScalars:
    @pytest.mark.parametrize("value,expected", [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-42, "-42"),
        (1.5, "1.5"),
    ])
    def test_scalars(self, renderer, value, expected):
        assert renderer.render(value) == expected

    def test_nan_rejected(self, renderer):
        with pytest.raises(UnrepresentableValueError):
            renderer.render(float("nan"))

    def test_infinity_rejected(self, renderer):
        with pytest.raises(UnrepresentableValueError):
            renderer.render(float("inf"))


class TestStrings:
    def test_plain_string(self, renderer):
        assert renderer.render("abc") == '"abc"'

    def test_escapes_quotes_and_backslashes(self, renderer):
        assert renderer.render('a"b\\c') == '"a\\"b\\\\c"'

    def test_escapes_control_characters(self, renderer):
        assert renderer.render("a\nb\tc") == '"a\\nb\\tc"'
        assert renderer.render("\x01") == '"\\x01"'

    def test_blocks_interpolation(self, renderer):
        assert renderer.render("#{danger}") == '"\\#{danger}"'
        assert renderer.render("#@ivar #$global") == '"\\#@ivar \\#$global"'

    def test_plain_hash_kept(self, renderer):
        assert renderer.render("issue #12") == '"issue #12"'

    def test_non_ascii_escaped(self, renderer):
        assert renderer.render("é") == '"\\u00E9"'
        assert renderer.render("\U0001F600") == '"\\u{1F600}"'


class TestTimes:
    def test_naive_datetime(self, renderer):
        value = datetime(2024, 3, 5, 14, 7, 9)
        assert renderer.render(value) == '"2024-03-05"'

    def test_aware_datetime_converted_to_utc(self, renderer):
        tz = timezone(timedelta(hours=2))
        value = datetime(2024, 3, 6, 1, 0, 0, tzinfo=tz)
        assert renderer.render(value) == '"2024-03-05"'

    def test_date(self, renderer):
        assert renderer.render(date(2024, 1, 2)) == '"2024-01-02"'


class TestCollections:
    def test_list(self, renderer):
        assert renderer.render([1, "a", None]) == '[1, "a", nil]'

    def test_tuple(self, renderer):
        assert renderer.render((True,)) == "[true]"

    def test_dict(self, renderer):
        assert renderer.render({"a": 1}) == '{ "a" => 1 }'

    def test_dict_pairs_sorted_by_key(self, renderer):
        a = renderer.render({"b": 2, "a": 1})
        b = renderer.render({"a": 1, "b": 2})
        assert a == b == '{ "a" => 1, "b" => 2 }'

    def test_empty_dict(self, renderer):
        assert renderer.render({}) == "{}"

    def test_nested_unrepresentable_rejected(self, renderer):
        with pytest.raises(UnrepresentableValueError):
            renderer.render([1, object()])


class TestUnrepresentable:
    def test_object_rejected(self, renderer):
        with pytest.raises(UnrepresentableValueError, match="object"):
            renderer.render(object())

    def test_set_rejected(self, renderer):
        with pytest.raises(UnrepresentableValueError):
            renderer.render({1, 2})

    def test_is_type_error(self):
        assert issubclass(UnrepresentableValueError, TypeError)
