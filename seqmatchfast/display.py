"""Text rendering of a search result.

Produces the aligned three-line diagram used by the command-line demo:

    pattern: atcgacgta
    text:    gcatcgatcagatatcgatcgacgtagcatgcacgacag
    match:                    atcgacgta

When the pattern is absent the offset equals len(text), so the pattern is
drawn just past the end of the text.
"""

LABEL_WIDTH = 9  # len("pattern: ")


def _label(name: str) -> str:
    return f"{name}:".ljust(LABEL_WIDTH)


def render_match(pattern: str, text: str, offset: int) -> str:
    """Render pattern and text with the pattern indented by offset.

    Parameters
    ----------
    pattern : str
        Pattern that was searched for
    text : str
        Text that was searched
    offset : int
        Search result, 0 <= offset <= len(text)

    Returns
    -------
    diagram : str
        Three newline-separated lines (no trailing newline)

    Examples
    --------
    >>> print(render_match("gata", "cgatag", 1))
    pattern: gata
    text:    cgatag
    match:    gata
    """
    if not 0 <= offset <= len(text):
        raise ValueError(f"Offset {offset} outside [0, {len(text)}]")
    return "\n".join([
        _label("pattern") + pattern,
        _label("text") + text,
        _label("match") + " " * offset + pattern,
    ])
