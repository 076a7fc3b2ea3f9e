"""Query tokenizer for free-text browse search."""

_TRIM_CHARS = " \t"


def tokenize(query: str) -> list[str]:
    """Split a raw query into lowercase search tokens.

    Splits on single spaces and trims spaces/tabs from each piece. Repeated
    spaces yield empty tokens, which are kept (an empty token is a substring
    of every name).

    Args:
        query: Raw query string (e.g. the ``q`` request parameter).

    Returns:
        Tokens in query order; an empty list for an empty query.
    """
    if not query:
        return []
    return [chunk.strip(_TRIM_CHARS) for chunk in query.lower().split(" ")]
