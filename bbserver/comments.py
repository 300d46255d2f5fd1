"""
Splitting of comments longer than Bitbucket's comment size limit.

Long output is cut into chunks posted as consecutive comments. Each chunk but
the last ends with ``sep_end`` and each chunk but the first starts with
``sep_start``, so a fenced block opened in one chunk is closed before the cut
and reopened after it.
"""

import math

# Maximum number of characters Bitbucket accepts in a single comment
MAX_COMMENT_LENGTH = 32768

SEP_END = "\n```\n**Warning**: Output length greater than max comment size. Continued in next comment."
SEP_START = "Continued from previous comment.\n```diff\n"


def split_comment(
    comment: str,
    max_size: int,
    sep_end: str,
    sep_start: str,
    max_comments: int = 0,
    truncation_header: str = "",
) -> list[str]:
    """
    Split ``comment`` into chunks no longer than ``max_size``.

    Chunks are cut from the end of the text backwards, so every chunk except
    possibly the first carries a full payload.

    Args:
        comment: Text to split
        max_size: Maximum length of a chunk, markers included
        sep_end: Appended to every chunk except the last
        sep_start: Prepended to every chunk except the first
        max_comments: Maximum number of chunks; 0 means unlimited. When the
            limit bites, the beginning of the text is dropped.
        truncation_header: Prepended to the first chunk instead of
            ``sep_start`` when text was dropped

    Returns:
        Chunks in posting order

    Raises:
        ValueError: If the markers leave no room for text
    """
    if len(comment) <= max_size:
        return [comment]

    # The first chunk opens with truncation_header or nothing, every other
    # chunk with sep_start; every chunk but the last closes with sep_end.
    payload = max_size - len(sep_end) - max(len(sep_start), len(truncation_header))
    if payload <= 0:
        raise ValueError(
            f"max_size {max_size} leaves no room for text after separators"
        )

    needed = math.ceil(len(comment) / payload)
    count = needed if max_comments == 0 else min(needed, max_comments)
    truncated = count < needed

    chunks: list[str] = []
    up_to = len(comment)
    for i in range(count):
        down_from = max(0, up_to - payload)
        portion = comment[down_from:up_to]
        is_first = i + 1 == count
        is_last = i == 0
        if not is_first:
            portion = sep_start + portion
        elif truncated:
            portion = truncation_header + portion
        if not is_last:
            portion += sep_end
        chunks.append(portion)
        up_to = down_from

    chunks.reverse()
    return chunks
