"""
game_loop.py: Frame scheduler that drives a frame callback at a target rate.
"""

import time
from typing import Callable, Optional

from .constants import TARGET_FPS

# Returning False from the callback stops the loop
FrameCallback = Callable[[float], Optional[bool]]


class GameLoop:
    """
    Calls frame_callback(timestamp_ms) once per frame until stopped.
    The simulation never schedules itself; the loop owns cadence and shutdown.
    """

    def __init__(self, frame_callback: FrameCallback,
                 time_source: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep,
                 target_fps: float = TARGET_FPS):
        if target_fps <= 0:
            raise ValueError("target_fps must be > 0")
        self.frame_callback = frame_callback
        self.time_source = time_source
        self.sleep = sleep
        self.frame_time = 1.0 / target_fps
        self.frame_count = 0

        self.running = False

    def stop(self):
        self.running = False

    def _step(self) -> bool:
        start_time = self.time_source()
        keep_going = self.frame_callback(start_time * 1000.0)
        self.frame_count += 1
        if keep_going is False:
            return False

        # Time remaining until next frame
        elapsed_time = self.time_source() - start_time
        sleep_time = self.frame_time - elapsed_time
        if sleep_time > 0:
            self.sleep(sleep_time)
        return True

    def run(self):
        """Blocks until stop() is called or the callback returns False."""
        self.running = True
        while self.running:
            if not self._step():
                break
        self.running = False

    def run_frames(self, frames: int):
        """Runs at most a fixed number of frames."""
        self.running = True
        for _ in range(frames):
            if not self.running or not self._step():
                break
        self.running = False
