"""
Small string helpers, to prepare text before it is written to the terminal.
"""

WHITESPACE = "\n\r\t "


def chomp(text, separator=None):
    """Remove trailing newlines.

    By default all trailing "\\r\\n" (if the text ends with one) or all
    trailing "\\n" are removed. Mixed occurrences are not removed, and a
    "\\r\\n" pair is never split.
    """
    if separator is None:
        if text.endswith("\r\n"):
            separator = "\r\n"
        elif text.endswith("\n"):
            while text.endswith("\n") and not text.endswith("\r\n"):
                text = text[:-1]
            return text
        else:
            return text
    if not separator:
        return text
    while text.endswith(separator):
        text = text[: -len(separator)]
    return text


def chuzzle(text):
    """Strip whitespace from both ends, and return None if nothing is left.

    Handy to fall back to a default: ``chuzzle(user_input) or "default"``.
    """
    return text.strip(WHITESPACE) or None


def split_around(text, delimiter):
    """Split text around the first occurrence of delimiter.

    Returns a tuple (head, tail), where tail is None if the delimiter is
    not found.
    """
    head, sep, tail = text.partition(delimiter)
    if not sep:
        return text, None
    return head, tail


def drop_suffix(text, suffix):
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def drop_git_suffix(text):
    return drop_suffix(text, ".git")


def multiline_indent(text, count):
    """Indent each line with count spaces. Empty lines are dropped."""
    indent = " " * count
    return "\n".join(indent + line for line in text.split("\n") if line)


def edit_distance(first, second):
    """Get the number of edits needed to transform first into second.

    Levenshtein distance, O(n*m).
    """
    previous = list(range(len(second) + 1))
    for i, c1 in enumerate(first, 1):
        current = [i]
        for j, c2 in enumerate(second, 1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                insertion = current[j - 1]
                deletion = previous[j]
                replacement = previous[j - 1]
                current.append(1 + min(insertion, deletion, replacement))
        previous = current
    return previous[-1]


def best_match(text, options):
    """Find the option that is closest to text.

    Options that need more than about a third of their length in edits are
    not considered. Returns None if no option is close enough.
    """
    candidates = []
    for option in options:
        distance = edit_distance(text, option)
        if distance <= (len(option) + 2) // 3:
            candidates.append((distance, option))
    if not candidates:
        return None
    # min() returns the first of equally close options
    return min(candidates, key=lambda x: x[0])[1]
