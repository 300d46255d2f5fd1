"""
Property-based tests for long comment splitting.
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from bbserver.comments import MAX_COMMENT_LENGTH, SEP_END, SEP_START, split_comment

END = "<end>"
START = "<start>"

text_strategy = st.text(max_size=400)
max_size_strategy = st.integers(min_value=len(END) + len(START) + 1, max_value=80)


def strip_markers(chunks: list[str], sep_end: str, sep_start: str) -> str:
    """Rebuild the original text from chunks, checking the markers are where expected."""
    pieces = []
    for i, chunk in enumerate(chunks):
        if i < len(chunks) - 1:
            assert chunk.endswith(sep_end)
            chunk = chunk[: len(chunk) - len(sep_end)]
        if i > 0:
            assert chunk.startswith(sep_start)
            chunk = chunk[len(sep_start):]
        assert chunk, "chunk carries no text"
        pieces.append(chunk)
    return "".join(pieces)


@given(comment=text_strategy, max_size=max_size_strategy)
@settings(max_examples=200)
def test_property_split_round_trip(comment: str, max_size: int) -> None:
    """
    Property: stripping the markers and concatenating the chunks gives back
    the original text, and no chunk is longer than the limit.
    """
    chunks = split_comment(comment, max_size, END, START)

    if len(comment) <= max_size:
        assert chunks == [comment]
    else:
        assert strip_markers(chunks, END, START) == comment
    assert all(len(chunk) <= max_size for chunk in chunks)


@given(comment=text_strategy, max_size=st.integers(min_value=0, max_value=500))
@settings(max_examples=100)
def test_property_short_comment_is_untouched(comment: str, max_size: int) -> None:
    """
    Property: a comment within the limit yields exactly one chunk, identical
    to the input.
    """
    assume(len(comment) <= max_size)

    assert split_comment(comment, max_size, END, START) == [comment]


@given(comment=st.text(min_size=1, max_size=300), max_size=max_size_strategy)
@settings(max_examples=50)
def test_property_split_is_deterministic(comment: str, max_size: int) -> None:
    """
    Property: identical input gives identical chunks.
    """
    assert split_comment(comment, max_size, END, START) == split_comment(
        comment, max_size, END, START
    )


def test_forty_thousand_characters_with_platform_limit() -> None:
    comment = "".join(chr(ord("a") + i % 26) for i in range(40000))

    chunks = split_comment(comment, MAX_COMMENT_LENGTH, SEP_END, SEP_START)

    assert len(chunks) >= 2
    assert chunks[0].endswith(SEP_END)
    assert chunks[1].startswith(SEP_START)
    assert all(len(chunk) <= MAX_COMMENT_LENGTH for chunk in chunks)
    assert strip_markers(chunks, SEP_END, SEP_START) == comment


def test_exactly_at_limit_is_one_chunk() -> None:
    comment = "x" * MAX_COMMENT_LENGTH

    assert split_comment(comment, MAX_COMMENT_LENGTH, SEP_END, SEP_START) == [comment]


def test_later_chunks_are_full() -> None:
    chunks = split_comment("abcdefghij", 5, "]", "[")

    # three characters of text fit between the markers
    assert chunks == ["a]", "[bcd]", "[efg]", "[hij"]


def test_separators_leaving_no_room_raise() -> None:
    with pytest.raises(ValueError):
        split_comment("x" * 20, 10, "12345", "67890")


class TestMaxComments:
    """Capping the number of chunks."""

    def test_cap_drops_the_beginning_and_adds_header(self) -> None:
        comment = "".join(str(i % 10) for i in range(100))

        chunks = split_comment(comment, 20, "]", "[", max_comments=3, truncation_header="TRUNC:")

        assert len(chunks) == 3
        assert chunks[0].startswith("TRUNC:")
        assert chunks[0].endswith("]")
        assert chunks[1].startswith("[") and chunks[1].endswith("]")
        assert chunks[2].startswith("[")
        assert comment.endswith(chunks[2][1:])
        assert all(len(chunk) <= 20 for chunk in chunks)

    def test_cap_not_reached_behaves_like_no_cap(self) -> None:
        comment = "y" * 30

        capped = split_comment(comment, 20, "]", "[", max_comments=5, truncation_header="TRUNC:")

        assert not capped[0].startswith("TRUNC:")
        assert strip_markers(capped, "]", "[") == comment

    @given(
        comment=st.text(min_size=1, max_size=300),
        max_size=st.integers(min_value=15, max_value=60),
        max_comments=st.integers(min_value=1, max_value=5),
    )
    @settings(max_examples=100)
    def test_property_capped_chunks_fit(self, comment: str, max_size: int, max_comments: int) -> None:
        """
        Property: with a cap, the chunk count never exceeds it and every chunk
        still fits the limit, header included.
        """
        chunks = split_comment(
            comment, max_size, END, START, max_comments=max_comments, truncation_header="[cut]\n"
        )

        assert 1 <= len(chunks) <= max_comments
        assert all(len(chunk) <= max_size for chunk in chunks)
