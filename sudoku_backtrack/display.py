"""Observers that show a solve as it happens.

Each display is a callable ``display(grid, step)`` suitable for passing
to the solver as its observer.
"""
from __future__ import annotations

import curses
import sys
import time

from tqdm import tqdm

GRID_HEIGHT = 9
CURSOR_UP = "\r\x1b[{}A".format(GRID_HEIGHT)

WINDOW_WIDTH = 9 * 2 + 3
FRAME_RATE = 30


class TerminalDisplay:
    """Redraws the grid in place using cursor-movement escape codes."""

    def __init__(self, delay=0.0, stream=None):
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self._started = False

    def __call__(self, grid, step):
        if not self._started:
            # Room for the first upward cursor move
            self.stream.write("\n" * GRID_HEIGHT)
            self._started = True

        if self.delay:
            time.sleep(self.delay)

        self.stream.write(CURSOR_UP)
        self.stream.write(str(grid))
        self.stream.flush()

    def finish(self, grid):
        if self._started:
            self.stream.write(CURSOR_UP)
        self.stream.write(str(grid))
        self.stream.flush()


class CursesDisplay:

    def __init__(self, screen, delay=0.0):
        self.screen = screen
        self.delay = delay
        self.last_frame_time = 0

    def __call__(self, grid, step):
        if self.delay:
            time.sleep(self.delay)
        elif time.time() - self.last_frame_time < 1 / FRAME_RATE:
            return

        self.last_frame_time = time.time()
        self.screen.erase()
        self.screen.addstr(
            0, 0, "=== STEP {} ".format(step).ljust(WINDOW_WIDTH, "=")
        )
        for i, line in enumerate(grid.simple_draw().split("\n")):
            self.screen.addstr(i + 1, 0, line)
        self.screen.refresh()

    @staticmethod
    def run(func, *args, **kwargs):
        """Call ``func(screen, *args, **kwargs)`` inside a curses session."""
        return curses.wrapper(func, *args, **kwargs)


class ProgressDisplay:
    """Counts trial steps on a tqdm progress bar."""

    def __init__(self, delay=0.0, file=None):
        self.delay = delay
        self.progress = tqdm(unit="step", file=file, leave=False)

    def __call__(self, grid, step):
        if self.delay:
            time.sleep(self.delay)
        self.progress.update(step - self.progress.n)

    def close(self):
        self.progress.close()
