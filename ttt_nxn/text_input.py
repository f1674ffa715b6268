"""
Parsing of move lists written as whitespace-delimited integers,
one ``player row col`` triple per line.
"""

import sys


class MoveFormatError(ValueError):
    """a line of move text could not be read as three integers"""

    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: {reason}: {line!r}")


def ltrim(text):
    return text.lstrip()


def rtrim(text):
    return text.rstrip()


def split_words(text):
    """split on any run of whitespace, ignoring leading/trailing blanks"""
    return rtrim(ltrim(text)).split()


def parse_move_line(line, line_number=1):
    """
    turn 'player row col' into a tuple of ints
    """
    words = split_words(line)
    if len(words) != 3:
        raise MoveFormatError(line_number, line, f"expected 3 integers, got {len(words)}")
    try:
        player, row, col = (int(w) for w in words)
    except ValueError:
        raise MoveFormatError(line_number, line, "not an integer") from None
    return player, row, col


def parse_moves(lines):
    """
    parse every move line; blank lines and '#' comments are skipped
    """
    moves = []
    for number, line in enumerate(lines, start=1):
        text = line.split("#", 1)[0]
        if not split_words(text):
            continue
        moves.append(parse_move_line(text, number))
    return moves


def read_moves(path):
    """read a moves file, '-' means stdin"""
    if path == "-":
        return parse_moves(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return parse_moves(f)
