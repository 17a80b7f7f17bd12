"""Field splitting for the semicolon-separated transition tables."""

EMPTY_FIELD = "-"


def split(text: str, delimiter: str) -> list[str]:
    """Split *text* on a one-character *delimiter*.

    Empty fields followed by a delimiter become ``"-"``. The final field is
    kept as it is, even when empty. The lone marker ``"-"`` splits into two
    markers, so that both halves of a ``target/output`` cell are defined.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if text == EMPTY_FIELD:
        return [EMPTY_FIELD, EMPTY_FIELD]
    *head, last = text.split(delimiter)
    return [field or EMPTY_FIELD for field in head] + [last]