"""Player controllers for the console match: human input or computer search."""

import time

from .Board import color_name

COMMANDS = ("undo", "hint", "auto", "quit")


class Player:
    is_computer = False

    def __init__(self, color):
        self.color = color

    def next_move(self, session):
        """Return (row, col), a command from COMMANDS, or a SearchResult for computer players."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, input_fn=None):
        super().__init__(color)
        self.input_fn = input_fn or input

    def next_move(self, session):
        """Text-input player: 'row col' (0-indexed) or one of the commands."""
        prompt = f"{color_name(self.color)} move as 'row col', or undo/hint/auto/quit: "
        raw = self.input_fn(prompt).strip().lower()
        if raw in COMMANDS:
            return raw

        try:
            row_str, col_str = raw.replace(",", " ").split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class ComputerPlayer(Player):
    is_computer = True

    def __init__(self, color, delay=0.0):
        super().__init__(color)
        self.delay = delay

    def next_move(self, session):
        if self.delay > 0:
            time.sleep(self.delay)
        return session.request_ai_move()
