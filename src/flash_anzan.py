#!/usr/bin/env python3
"""
Flash Anzan - flash mental arithmetic game

Numbers are flashed one at a time; the player types their sum.
Runs in a terminal with synthesized audio feedback.
"""

import argparse
import logging
import random
import signal
import sys
from typing import List, Optional

from audio_system import MockSoundController
from game_system import DIFFICULTY_LEVELS, GameConfig, GameSession
from game_system.game_manager import GameManager
from input_system import KeyboardReader
from utils import HybridLogger

# Global logger reference for signal handlers
_global_logger = None


def emergency_flush_and_log(sig=None, frame=None):
    """Flush logs before the process is terminated"""
    if _global_logger:
        _global_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
        _global_logger.flush()
    sys.exit(1)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flash-anzan",
        description="Flash mental arithmetic: remember the flashed numbers and type their sum."
    )
    parser.add_argument("--level", type=int, default=1,
                        help=f"Starting level 1-{len(DIFFICULTY_LEVELS)} (default: 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible rounds")
    parser.add_argument("--mock-audio", action="store_true",
                        help="Disable audio output")
    parser.add_argument("--volume", type=float, default=1.0,
                        help="Master volume 0.0-1.0 (default: 1.0)")
    parser.add_argument("--frame-ms", type=float, default=20.0,
                        help="Game loop frame duration in ms (default: 20)")
    parser.add_argument("--log-dir", default="logs",
                        help="Directory for log files (default: logs)")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Log to the console only")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--list-levels", action="store_true",
                        help="Print the difficulty levels and exit")
    return parser.parse_args(argv)


def create_config(args: argparse.Namespace) -> GameConfig:
    """Build the runtime configuration from command line arguments"""
    return GameConfig(
        frame_duration_ms=args.frame_ms,
        default_preset_index=args.level - 1,
        seed=args.seed,
        use_mock_audio=args.mock_audio,
        master_volume=args.volume,
        log_dir=None if args.no_log_file else args.log_dir,
        log_level=logging.DEBUG if args.debug else logging.INFO
    )


def create_sound_controller(config: GameConfig, main_logger: HybridLogger):
    """
    Create the feedback sink: pygame audio, or the mock when disabled or unavailable.
    """
    sound_logger = main_logger.get_class_logger("SoundController", config.log_level)
    if config.use_mock_audio:
        return MockSoundController(logger=sound_logger)

    # Imported here so --mock-audio runs without touching the audio stack
    import pygame
    from audio_system.sound_controller import SoundController

    try:
        return SoundController(
            logger=sound_logger,
            sample_rate_hz=config.sample_rate_hz,
            master_volume=config.master_volume
        )
    except pygame.error as e:
        sound_logger.warning(f"Audio unavailable ({e}) - falling back to MockSoundController")
        return MockSoundController(logger=sound_logger)


def create_game_system(config: GameConfig, main_logger: HybridLogger) -> GameManager:
    """
    Create and configure the complete game system.

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()

    session = GameSession(
        logger=main_logger.get_class_logger("GameSession", config.log_level),
        sound_controller=create_sound_controller(config, main_logger),
        rng=random.Random(config.seed),
        preset_index=config.default_preset_index
    )

    return GameManager(
        session=session,
        key_reader=KeyboardReader(logger=main_logger.get_class_logger("KeyboardReader", config.log_level)),
        logger=main_logger.get_class_logger("GameManager", config.log_level),
        frame_duration_ms=config.frame_duration_ms
    )


def print_levels() -> None:
    for number, preset in enumerate(DIFFICULTY_LEVELS, start=1):
        print(f"{number}. {preset.icon} {preset.name}: {preset.count} numbers, "
              f"{preset.interval_ms}ms each, 1-{preset.max_value}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - sets up and runs the game.
    """
    args = parse_args(argv)
    if args.list_levels:
        print_levels()
        return 0

    config = create_config(args)

    main_logger = HybridLogger("FlashAnzan", log_dir=config.log_dir)
    app_logger = main_logger.get_main_logger(config.log_level)

    global _global_logger
    _global_logger = app_logger
    signal.signal(signal.SIGTERM, emergency_flush_and_log)

    app_logger.info("🧮 FLASH ANZAN")
    app_logger.info("Keys: 1-9 level | Enter start/go/submit | 0-9 answer | c clear | r retry | h home | Esc reset | q quit")

    try:
        game_manager = create_game_system(config, main_logger)
        app_logger.info(f"Game settings: {config.frame_duration_ms}ms frame duration ({config.target_fps:.1f} FPS)")
        game_manager.run_game_loop()
    except Exception as e:
        app_logger.error(f"Flash Anzan error: {e}", exception=e)
        app_logger.flush()
        raise
    finally:
        app_logger.info("✅ Flash Anzan shut down")
        main_logger.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
