"""Window setup and the fixed-rate main loop."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH
from .game import Game

logger = logging.getLogger(__name__)

LOOP_TIME = 1.0 / 60
AVERAGING_PERIOD = 60 * 60


@dataclass(frozen=True)
class TimingAverages:
    """Frame timing averaged over one period."""

    fps: float
    sleep: float
    process: float


@dataclass
class FrameStats:
    """Collects per-frame sleep times and reports averages once per period."""

    loop_time: float = LOOP_TIME
    period: int = AVERAGING_PERIOD
    started: float = field(default_factory=time.perf_counter)
    tick_no: int = 0
    sleep_total: float = 0.0

    def record(self, sleep_time: float, now: float) -> TimingAverages | None:
        """Count one frame; at the end of a period return its averages and restart."""
        self.sleep_total += sleep_time
        self.tick_no += 1
        if self.tick_no % self.period:
            return None
        elapsed = now - self.started
        fps = self.period / elapsed if elapsed > 0 else float("inf")
        average_sleep = self.sleep_total / self.period
        averages = TimingAverages(fps, average_sleep, self.loop_time - average_sleep)
        self.sleep_total = 0.0
        self.started = now
        return averages


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chomper", description="Maze arcade game.")
    parser.add_argument(
        "--assets", default="assets", help="directory holding the game images"
    )
    return parser.parse_args(argv)


class _Loop:
    def __init__(self, game: Game) -> None:
        self.game = game
        self.paused = False
        self.shown = False

    def handle(self, event: pygame.event.Event) -> bool:
        """Process one event; False when the game should exit."""
        if event.type == pygame.WINDOWHIDDEN:
            logger.debug("Window hidden")
            self.shown = False
        elif event.type == pygame.WINDOWSHOWN:
            logger.debug("Window shown")
            self.shown = True
        elif event.type == pygame.QUIT or (
            event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q)
        ):
            logger.info("Exit requested. Exiting...")
            return False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
            self.paused = not self.paused
            logger.info("Paused" if self.paused else "Unpaused")
        elif event.type == pygame.KEYDOWN:
            self.game.keyboard_event(event.key)
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until the player quits."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(message)s")

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Pac-Man")
        assets = Path(args.assets)
        atlas = pygame.image.load(str(assets / "32" / "pacman.png")).convert_alpha()
        map_texture = pygame.image.load(str(assets / "map.png")).convert()
        game = Game(screen, atlas, map_texture)

        game.draw()
        pygame.display.flip()
        game.tick()

        loop = _Loop(game)
        stats = FrameStats(loop_time=LOOP_TIME)
        logger.info("Starting game loop (%.3fms)", LOOP_TIME * 1000.0)

        while True:
            start = time.perf_counter()
            for event in pygame.event.get():
                if not loop.handle(event):
                    return 0

            if not loop.paused:
                game.tick()
                game.draw()
                pygame.display.flip()

            elapsed = time.perf_counter() - start
            slept = 0.0
            if elapsed < LOOP_TIME:
                slept = LOOP_TIME - elapsed
                time.sleep(slept)
            else:
                logger.warning(
                    "Game loop behind schedule by: %.3fms", (elapsed - LOOP_TIME) * 1000.0
                )

            averages = stats.record(slept, time.perf_counter())
            if averages is not None:
                logger.debug(
                    "Timing Averages [fps=%s] [sleep=%.3fms] [process=%.3fms]",
                    averages.fps,
                    averages.sleep * 1000.0,
                    averages.process * 1000.0,
                )
    finally:
        pygame.quit()