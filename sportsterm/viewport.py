"""Scroll window arithmetic for the game list and the detail body."""

# Each game card: status, blank, two team rows, blank, venue, time, two
# border lines and two lines of spacing.
LINES_PER_GAME = 11
# Title, status line, blank, help and margins around the game list.
GAME_LIST_RESERVED = 11

DETAIL_HEADER_LINES = 8
DETAIL_RESERVED = 4


def visible_count(height: int, reserved: int = GAME_LIST_RESERVED, per_item: int = LINES_PER_GAME) -> int:
    """How many items fit in ``height`` rows. Always at least one."""
    return max(1, (height - reserved) // per_item)


def max_offset(count: int, visible: int) -> int:
    return max(0, count - visible)


def follow_cursor(cursor: int, offset: int, visible: int, count: int) -> int:
    """Smallest change to ``offset`` that keeps ``cursor`` on screen."""
    if cursor < offset:
        offset = cursor
    elif cursor >= offset + visible:
        offset = cursor - visible + 1
    return max(0, min(offset, max_offset(count, visible)))


def clamp_offset(offset: int, total: int, available: int) -> int:
    """Clamp a free scroll offset once the content length is known."""
    return max(0, min(offset, max_offset(total, available)))


def window(offset: int, visible: int, count: int) -> tuple[int, int]:
    start = max(0, min(offset, count))
    return start, min(start + visible, count)


def detail_available_lines(height: int) -> int:
    return max(1, height - DETAIL_HEADER_LINES - DETAIL_RESERVED)
