"""
Main game manager - orchestrates key input, the game session and status output
"""

import time
from typing import Optional, TYPE_CHECKING

import psutil

from input_system.key_bindings import ControlCommand, KeyBindings
from utils import OnceInMs
from .snapshot import SessionSnapshot

if TYPE_CHECKING:
    from input_system.interfaces import IKeyReader
    from utils import ClassLogger
    from .session import GameSession


class GameManager:
    """
    Main game manager that runs a game session in real time.

    Responsibilities:
    - Poll key input and translate it into session triggers
    - Drive session timers once per frame
    - Report the session snapshot whenever it changes
    - Maintain consistent frame timing
    """

    def __init__(self,
                 session: 'GameSession',
                 key_reader: 'IKeyReader',
                 logger: 'ClassLogger',
                 key_bindings: Optional[KeyBindings] = None,
                 frame_duration_ms: float = 20):
        """
        Initialize the game manager.

        Args:
            session: GameSession to drive
            key_reader: Source of key presses
            logger: Logger for status output and diagnostics
            key_bindings: Key map (defaults to KeyBindings())
            frame_duration_ms: Target frame duration in milliseconds
        """
        self.session = session
        self.key_reader = key_reader
        self.key_bindings = key_bindings or KeyBindings()
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.logger = logger
        self.running = True
        self.frame_count = 0

        self._last_snapshot: Optional[SessionSnapshot] = None

        # Memory monitoring using OnceInMs
        self._memory_monitor = OnceInMs(60000)  # Log every 60 seconds
        self._process = psutil.Process()

        self.logger.info(f"GameManager initialized: {frame_duration_ms}ms frame duration")

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Returns when a quit key is pressed or on Ctrl+C.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")
        self.key_reader.setup()

        try:
            while self.running:
                frame_start = time.time()

                self.update()

                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One frame: input → triggers → timers → status report.
        """
        self.frame_count += 1

        if self._memory_monitor.should_execute():
            self._log_memory_usage()

        for key in self.key_reader.read_keys():
            if not self.running:
                break
            self._handle_key(key)

        self.session.update()
        self._report_snapshot()

    def _handle_key(self, key: str) -> None:
        action = self.key_bindings.resolve(key, self.session.phase)
        if action is None:
            self.logger.debug(f"Unbound key {key!r} in {self.session.phase.value}")
            return

        if action is ControlCommand.QUIT:
            self.logger.info("Quit requested")
            self.running = False
        elif action is ControlCommand.RESET:
            self.session.reset()
        else:
            self.session.dispatch(action)

    def _report_snapshot(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot != self._last_snapshot:
            self._last_snapshot = snapshot
            self.logger.info(snapshot.describe())

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False
        self.key_reader.cleanup()
        sound_controller = self.session.sound_controller
        if sound_controller is not None:
            sound_controller.cleanup()
        self.logger.info(f"Game stopped - final score {self.session.score}")

    def _log_memory_usage(self) -> None:
        """Log current memory and CPU usage of this process"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            self.logger.info(
                f"💾 Memory - Process: {process_mb:.1f}MB | "
                f"⚙️  CPU - Process: {process_cpu_percent:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")
