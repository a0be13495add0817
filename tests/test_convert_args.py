import pytest

from litmaps import ConversionShapeError, LiteralBuilder, convert_args, hashmap, hashset, sortedmap


def test_convert_keys_and_values():
    m = convert_args(hashmap, keys=str, values=int)((1, "10"), (2, "20"))
    assert m == {"1": 10, "2": 20}


def test_convert_keys_only():
    m = convert_args(hashmap, keys=str)((1, "a"), (2, "b"))
    assert m == {"1": "a", "2": "b"}


def test_conversion_happens_before_overwrite():
    m = convert_args(hashmap, keys=str.lower)(("A", 1), ("a", 2))
    assert m == {"a": 2}


def test_convert_set_elements():
    s = convert_args(hashset, keys=str.lower)("A", "a", "B")
    assert s == {"a", "b"}


def test_values_converter_rejected_for_sets():
    with pytest.raises(ConversionShapeError) as exc:
        convert_args(hashset, values=str)
    assert exc.value.code == "LE0003"
    assert "HashSet" in str(exc.value)


def test_no_converters_is_identity():
    assert convert_args(hashmap)((1, "a")) == hashmap((1, "a"))


def test_outer_converter_runs_first():
    inner = convert_args(hashmap, keys=lambda k: k * 2)
    outer = convert_args(inner, keys=int)
    assert outer(("3", None)) == {6: None}


def test_convert_args_accepts_family_name():
    m = convert_args("SortedMap", values=str)((2, 2), (1, 1))
    assert list(m.items()) == [(1, "1"), (2, "2")]


def test_convert_args_keeps_original_builder():
    converted = convert_args(sortedmap, keys=str)
    assert isinstance(converted, LiteralBuilder)
    assert converted.family is sortedmap.family
    assert sortedmap.keys is None


def test_into_keeps_converters(recording_dict):
    m = convert_args(hashmap, keys=str).into(recording_dict)((1, 1))
    assert type(m) is recording_dict
    assert m == {"1": 1}
