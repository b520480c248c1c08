"""Map source offsets to human-readable locations."""


def offset_to_pos(source_name: str, text: str, offset: int) -> str:
    """Return `<source>:<line>:<column>` for an offset into text.

    Lines and columns are 1-based. An offset at or past the end of the
    text has no column, so only `<source>:<line>` is returned, using the
    last line number.
    """
    if offset >= len(text):
        last_line = text.count("\n") + 1
        return f"{source_name}:{last_line}"

    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return f"{source_name}:{line}:{offset - line_start + 1}"
