"""Three-column title line for documentation pages."""


def top_title(left: str, center: str, right: str, cols: int) -> str:
    """Lay out a left, center and right heading on a single line.

    The name comes from the header line at the top of traditional UNIX man
    pages. The center text stays in the middle for as long as everything
    fits. When it does not, the left text is dropped first, then the right
    text, and finally the center text is truncated to ``cols``.

    Args:
        left: Text flush with the start of the line
        center: Text centered on the line
        right: Text flush with the end of the line
        cols: Width of the line in characters

    Returns:
        The laid out title line
    """
    if len(left) + len(center) + len(right) <= cols:
        side = (cols - len(center)) // 2
        left_pad = " " * max(side - len(left), 0)
        right_pad = " " * max(side - len(right), 0)
        return left + left_pad + center + right_pad + right

    if len(center) + len(right) <= cols:
        pad = " " * (cols - len(center) - len(right))
        return center + pad + right

    if len(center) <= cols:
        pad = " " * ((cols - len(center)) // 2)
        return pad + center + pad

    return center[: max(cols, 0)]
