"""Logic for computing a file's design token propagation percentage."""

NOT_APPLICABLE = -1


def compute_percentage(total: int, token_count: int, ignored_count: int) -> float:
    """Return the share of non-ignored declarations that resolve to a token.

    Ignored declarations (excluded values that are not tokens) are removed from
    the denominator. Returns ``NOT_APPLICABLE`` when nothing is left to score.
    """
    denominator = total - ignored_count
    if total == 0 or denominator == 0:
        return NOT_APPLICABLE
    return round((100 / denominator) * token_count, 2)
