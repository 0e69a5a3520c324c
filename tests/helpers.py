# Column order that fills a 6 x 7 board without anyone connecting four,
# whichever player opens: rows alternate "o o * * o o *" and "* * o o * * o".
DRAW_ORDER_6X7 = [0, 2, 1, 3, 4, 6, 5] * 6


def scripted_input(lines):
    """Input callable that replays lines, then behaves like a closed stdin."""
    remaining = iter(lines)

    def read():
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read
