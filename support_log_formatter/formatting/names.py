"""
Abbreviation of dotted names to fit a column width.
"""

from typing import Optional

# Only the first MAX_DOTS separators are considered; anything after the
# last considered dot is kept as the final segment.
MAX_DOTS = 16


def abbreviate_class_name(name: Optional[str], target_width: int) -> str:
    """
    Shorten a dotted name so that it fits ``target_width`` where possible.

    Leading segments are cut down to their first character, left to right,
    until enough characters are saved. The last segment is never shortened,
    so the result can still be wider than the target.

    Args:
        name: Fully qualified dotted name, or None
        target_width: Desired width in characters

    Returns:
        The abbreviated name, or ``"-"`` when no name is given

    Example:
        ```python
        abbreviate_class_name("org.example.deeply.nested.package.ClassName", 32)
        # "o.e.d.nested.package.ClassName"
        ```
    """
    if target_width < 1:
        raise ValueError(f"target_width must be positive, got {target_width}")
    if name is None:
        return "-"
    if len(name) < target_width:
        return name

    dots = []
    index = name.find(".")
    while index != -1 and len(dots) < MAX_DOTS:
        dots.append(index)
        index = name.find(".", index + 1)
    if not dots:
        return name

    required_savings = len(name) - target_width
    segments = []
    previous = -1
    for dot in dots:
        segment = name[previous + 1 : dot]
        keep = min(len(segment), 1) if required_savings > 0 else len(segment)
        required_savings -= len(segment) - keep
        segments.append(segment[:keep])
        previous = dot
    segments.append(name[dots[-1] + 1 :])
    return ".".join(segments)
