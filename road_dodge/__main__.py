"""
Entry point: python -m road_dodge

Usage:
    python -m road_dodge                        # Default player "player1"
    python -m road_dodge --player-name racer    # Custom player label
    python -m road_dodge --log-level VERBOSE    # Trace collisions
"""

import argparse
import sys

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.game_settings import Display
from road_dodge.core.runtime.main_loop import MainLoop
from road_dodge.scenes.road_scene import RoadScene, load_game_config
from road_dodge.ui.hud_loader import HudLoader


def build_parser():
    parser = argparse.ArgumentParser(prog="road_dodge", description="Dodge the obstacles on the road")
    parser.add_argument("--player-name", default=None,
                        help="Label of the player car (default from game.json)")
    parser.add_argument("--config", default="game.json",
                        help="Game data file name or absolute path")
    parser.add_argument("--hud", default="hud.yaml",
                        help="HUD layout file in the ui config directory")
    parser.add_argument("--log-level", default="INFO",
                        choices=list(DebugLogger.LEVEL_VALUES),
                        help="Console log verbosity")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help="Target frame rate")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    DebugLogger.set_level(args.log_level)

    config = load_game_config(args.config, args.player_name)
    hud_layout = HudLoader().load(args.hud)
    scene = RoadScene(config, hud_layout)

    MainLoop(scene, fps=args.fps).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
