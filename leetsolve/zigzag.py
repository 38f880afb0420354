"""Zigzag row conversion of a string."""


def convert(s, num_rows):
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows <= 1 or num_rows >= len(s):
        return s
    cycle = 2 * num_rows - 2
    rows = [[] for _ in range(num_rows)]
    for pos, ch in enumerate(s):
        step = pos % cycle
        rows[min(step, cycle - step)].append(ch)
    return "".join("".join(row) for row in rows)