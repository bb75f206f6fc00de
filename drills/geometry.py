"""Basic measurements of axis-aligned rectangles."""


def rectangle_report(width: int, height: int) -> tuple[int, int, bool]:
    """Return ``(area, perimeter, is_square)`` for a rectangle.

    Both sides must be non-negative integers.
    """
    if width < 0 or height < 0:
        raise ValueError("rectangle sides must be non-negative")
    area = width * height
    perimeter = 2 * (width + height)
    return area, perimeter, width == height