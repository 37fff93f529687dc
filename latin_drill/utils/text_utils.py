"""Text processing utilities."""

import unicodedata


def normalize_for_search(text: str) -> str:
    """Normalize text for case- and accent-insensitive comparison.

    Lowercases, strips combining marks (acute accents, diaereses, Latin
    macrons), maps ñ to n and trims surrounding whitespace.

    Args:
        text: Text to normalize

    Returns:
        Normalized text; empty string for empty input

    Example:
        normalize_for_search("  Rosā ") == "rosa"
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.replace("ñ", "n").strip()


def compare_strings(first: str, second: str) -> bool:
    """Check whether two strings are equal ignoring case and accents."""
    return normalize_for_search(first) == normalize_for_search(second)


def string_includes(haystack: str, needle: str) -> bool:
    """Check whether haystack contains needle, ignoring case and accents."""
    if not haystack or not needle:
        return False
    return normalize_for_search(needle) in normalize_for_search(haystack)


def string_starts_with(text: str, prefix: str) -> bool:
    """Check whether text starts with prefix, ignoring case and accents."""
    if not text or not prefix:
        return False
    return normalize_for_search(text).startswith(normalize_for_search(prefix))


def fuzzy_search_score(search_term: str, target: str) -> float:
    """Score how well target matches a search term.

    Args:
        search_term: What the user typed
        target: Candidate text

    Returns:
        1.0 for an exact match, 0.8 for a prefix match, 0.5 for a
        substring match, 0.0 otherwise
    """
    needle = normalize_for_search(search_term)
    haystack = normalize_for_search(target)

    if not needle:
        return 0.0
    if needle == haystack:
        return 1.0
    if haystack.startswith(needle):
        return 0.8
    if needle in haystack:
        return 0.5
    return 0.0


def format_time(seconds: int) -> str:
    """Format a second count as M:SS for timer displays.

    Args:
        seconds: Seconds to format; negative values count as zero

    Returns:
        e.g. "9:05" for 545
    """
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"
