"""CLI options for selecting mode, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku Arena (connect five)")
    parser.add_argument("--board-size", type=int, help="Board size (5 to 25)")
    parser.add_argument(
        "--mode",
        choices=["pvp", "vs-computer", "ai-vs-ai"],
        default=None,
        help="Play mode (default from settings)",
    )
    parser.add_argument("--depth", type=int, help="Fixed search depth (default: adaptive)")
    parser.add_argument("--root-candidates", type=int, help="Candidate moves explored at the root")
    parser.add_argument("--node-candidates", type=int, help="Candidate moves explored below the root")
    parser.add_argument("--delay", type=float, help="Seconds to pause before each computer move")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)
