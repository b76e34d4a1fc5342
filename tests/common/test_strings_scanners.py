from autocompress.common.strings.scanners import (
    digits_before_unit,
    line_after,
    token_after,
    value_before_unit,
)


def test_line_after_first_occurrence_only():
    text = "a: 1\nb: 2\na: 3\n"
    assert line_after(text, "a:") == " 1"


def test_line_after_missing_marker():
    assert line_after("nothing here", "Duration:") is None
    assert line_after("", "Duration:") is None


def test_line_after_marker_at_end():
    assert line_after("Duration:", "Duration:") == ""


def test_token_after_skips_blanks_and_stops_at_comma():
    assert token_after("  Duration:   01:02:03.50, start: 0", "Duration:") == "01:02:03.50"


def test_token_after_nothing_follows():
    assert token_after("Duration:\nnext line", "Duration:") is None


def test_value_before_unit():
    assert value_before_unit(" 1234 kb/s", "kb/s") == "1234"
    assert value_before_unit(" N/A", "kb/s") is None
    assert value_before_unit(" kb/s", "kb/s") is None


def test_digits_before_unit_ignores_surrounding_text():
    assert digits_before_unit("stereo, fltp, 128 kb/s (default)", "kb/s") == "128"
    assert digits_before_unit("mono, 64 kb/s", "kb/s") == "64"
    assert digits_before_unit("5.1, 1536kb/s", "kb/s") == "1536"


def test_digits_before_unit_no_digits_or_no_unit():
    assert digits_before_unit("stereo, fltp (default)", "kb/s") is None
    assert digits_before_unit("stereo, N/A kb/s", "kb/s") is None
