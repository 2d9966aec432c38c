"""Entry point for Gomoku Arena games. Load config, wire players, start the match."""

import logging
from pathlib import Path

import yaml

from .Board import BLACK, WHITE
from .GameSession import AI_VS_AI, VS_COMPUTER, GameSession
from .Match import Match
from .Player import ComputerPlayer, HumanPlayer
from .utils.cli import parse_args
from .utils.logger import log_event, setup_logging

LOGGER = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 15,
    "mode": VS_COMPUTER,
    "ai_delay_seconds": 0.2,
    "search_depth": None,
    "root_candidate_limit": 20,
    "node_candidate_limit": 15,
    "log_level": "INFO",
    "gui": False,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Arena/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read the YAML settings file over the defaults; a missing file means defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        LOGGER.info("Settings file %s not found; using defaults", path)
    return settings


def merge_args(settings, args):
    """Command-line flags take precedence over the settings file."""
    merged = dict(settings)
    overrides = {
        "board_size": args.board_size,
        "mode": args.mode,
        "search_depth": args.depth,
        "root_candidate_limit": args.root_candidates,
        "node_candidate_limit": args.node_candidates,
        "ai_delay_seconds": args.delay,
        "log_level": args.log_level,
    }
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    if args.gui:
        merged["gui"] = True
    return merged


def build_session(settings):
    return GameSession(
        size=settings["board_size"],
        mode=settings["mode"],
        depth=settings["search_depth"],
        root_limit=settings["root_candidate_limit"],
        node_limit=settings["node_candidate_limit"],
    )


def build_players(mode, delay=0.0, input_fn=None):
    """Black and white controllers for a console match in the given mode."""
    if mode == AI_VS_AI:
        return ComputerPlayer(BLACK, delay=delay), ComputerPlayer(WHITE, delay=delay)
    if mode == VS_COMPUTER:
        return HumanPlayer(BLACK, input_fn=input_fn), ComputerPlayer(WHITE, delay=delay)
    return HumanPlayer(BLACK, input_fn=input_fn), HumanPlayer(WHITE, input_fn=input_fn)


def main(argv=None):
    args = parse_args(argv)
    settings = merge_args(load_settings(args.settings), args)
    setup_logging(settings["log_level"])

    session = build_session(settings)
    delay = float(settings["ai_delay_seconds"] or 0.0)

    if settings["gui"]:
        from .gui.pygame_view import PygameView

        view = PygameView(board_size=session.size)
        session.new_game()
        view.run(session, delay=delay)
        return session.last_outcome

    black, white = build_players(session.mode, delay=delay)
    match = Match(
        session,
        black_player=black,
        white_player=white,
        logger=log_event,
        renderer=lambda s: print(s.board.render()),
    )
    return match.play()


if __name__ == "__main__":
    main()
