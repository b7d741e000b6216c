"""Text helpers: greedy word wrapping, name truncation and markup escaping."""

from moverchart.models import WrappedText

ELLIPSIS = "..."

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def _find_break(text: str, max_line_length: int) -> int:
    """
    Find where to split `text`, which is longer than `max_line_length`.

    Scans backward from `max_line_length` for a space, then forward; a
    single token with no space anywhere is hard-broken at the limit.
    """
    split = max_line_length
    while split > 0 and text[split] != " ":
        split -= 1
    if split > 0:
        return split

    split = text.find(" ", max_line_length)
    if split == -1:
        return max_line_length
    return split


def wrap_text(
    text: str,
    max_line_length: int = 30,
    max_lines: int = 4,
    max_total_length: int = 200,
) -> WrappedText:
    """
    Greedily wrap `text` into at most `max_lines` lines.

    Args:
        text: Free text to wrap
        max_line_length: Target characters per line
        max_lines: Maximum number of lines to emit
        max_total_length: Text longer than this is cut and given an ellipsis
            before wrapping

    Returns:
        WrappedText whose `truncated` flag is set when any text was dropped.
        When lines run out, the last three characters of the final line are
        replaced by an ellipsis.

    Examples:
        wrap_text("Merger deal with MBody AI; cancer diagnostics focus")
        -> ("Merger deal with MBody AI;", "cancer diagnostics focus")
    """
    truncated = False
    remaining = text
    if len(remaining) > max_total_length:
        remaining = remaining[:max_total_length] + ELLIPSIS
        truncated = True

    lines: list[str] = []
    while remaining:
        if len(remaining) <= max_line_length:
            lines.append(remaining)
            break

        split = _find_break(remaining, max_line_length)
        lines.append(remaining[:split].strip())
        remaining = remaining[split:].strip()

        if len(lines) >= max_lines and remaining:
            lines[-1] = lines[-1][:-3] + ELLIPSIS
            truncated = True
            break

    return WrappedText(lines=tuple(lines), truncated=truncated)


def truncate_name(name: str, max_length: int = 12) -> str:
    """Cut a company name to `max_length` characters and mark the cut."""
    if len(name) > max_length:
        return name[:max_length] + ELLIPSIS
    return name


def escape_xml(text: str) -> str:
    """Escape the five reserved markup characters."""
    for raw, escaped in _XML_ESCAPES:
        text = text.replace(raw, escaped)
    return text
