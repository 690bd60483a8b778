"""Edit-distance similarity between translation keys."""


def levenshtein_distance(first: str, second: str) -> int:
    """Minimum number of single-character edits turning first into second."""
    if len(first) < len(second):
        first, second = second, first
    previous = list(range(len(second) + 1))
    for i, char_a in enumerate(first, start=1):
        current = [i]
        for j, char_b in enumerate(second, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def similarity(first: str, second: str) -> float:
    """Similarity in [0, 1]: share of the longer string left unedited.

    Example:
        >>> similarity("nav.home", "nav.hom")
        0.875
    """
    longer = max(len(first), len(second))
    if longer == 0:
        return 1.0
    return (longer - levenshtein_distance(first, second)) / longer
