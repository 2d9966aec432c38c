"""Console game loop: drives a GameSession with two players until the game ends."""

from .Board import BLACK, WHITE, color_name
from .GameSession import IN_PROGRESS, outcome_text


class Match:
    def __init__(self, session, black_player, white_player, logger=print, renderer=None):
        self.session = session
        self.players = {BLACK: black_player, WHITE: white_player}
        self.logger = logger
        self.renderer = renderer

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), 0 (draw) or None if quit."""
        session = self.session
        if session.status != IN_PROGRESS:
            session.new_game()

        while session.status == IN_PROGRESS:
            if self.renderer:
                self.renderer(session)

            color = session.active_player
            player = self.players[color]
            tag = "B" if color == BLACK else "W"

            if player.is_computer:
                result = player.next_move(session)
                session.apply_ai_move(result)
                self.logger(f"Move {len(session.history)}: {tag} {result.move} ({result.reason})")
                continue

            try:
                action = player.next_move(session)
                if action == "quit":
                    self.logger(f"{color_name(color)} quit")
                    return None
                if action == "undo":
                    removed = session.undo()
                    self.logger(f"Undo: {removed} move(s) taken back")
                    continue
                if action == "hint":
                    hint = session.suggest_move()
                    self.logger(f"Hint for {color_name(color)}: {hint.move}")
                    continue
                if action == "auto":
                    session.apply_hint()
                    last = session.history[-1]
                    self.logger(f"Move {len(session.history)}: {tag} {(last.row, last.col)} (auto)")
                    continue
                session.apply_human_move(*action)
            except ValueError as exc:
                self.logger(f"Rejected: {color_name(color)} - {exc}")
                continue

            self.logger(f"Move {len(session.history)}: {tag} {action}")

        if self.renderer:
            self.renderer(session)
        self.logger(f"Result: {outcome_text(session.outcome)}")
        return session.outcome
