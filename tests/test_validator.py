"""Test lyric data validation"""

from core.lyric import LyricData, LyricItem, LyricLine, LyricType, LyricValidator, parse_lrc, parse_yrc


def test_parsed_data_is_valid(sample_lrc, yrc_with_metadata):
    validator = LyricValidator()

    assert validator.validate(parse_lrc(sample_lrc)) == (True, [])
    data, _ = parse_yrc(yrc_with_metadata)
    assert validator.validate(data) == (True, [])


def test_detects_errors():
    data = LyricData(
        type=LyricType.WORD,
        lines=[
            LyricLine(
                items=[
                    LyricItem(text="b", start_time=2000, duration=100),
                    LyricItem(text="a", start_time=1500, duration=-1),
                ],
                start_time=2000,
                duration=50,
                original_text="ba",
            ),
            LyricLine(items=[], start_time=3000, duration=0, original_text=""),
            LyricLine(
                items=[LyricItem(text="c", start_time=1000, duration=100)],
                start_time=1000,
                duration=100,
                original_text="c",
            ),
        ],
    )

    is_valid, errors = LyricValidator().validate(data)

    assert is_valid is False
    error_types = [(error.line_index, error.word_index, error.error_type) for error in errors]
    assert (0, 1, 'TIME_NEGATIVE') in error_types
    assert (0, 1, 'WORD_ORDER') in error_types
    assert (1, -1, 'EMPTY_LINE') in error_types
    assert (2, -1, 'LINE_ORDER') in error_types
