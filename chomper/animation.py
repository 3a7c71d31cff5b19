"""A sprite-sheet animation that plays forwards then backwards."""

from __future__ import annotations

import pygame

from .direction import Direction


class AnimatedTexture:
    """Horizontal strip of equally sized frames, ping-ponged over time."""

    def __init__(
        self,
        texture: pygame.Surface,
        ticks_per_frame: int,
        frame_count: int,
        frame_width: int,
        frame_height: int,
        offset: tuple[int, int] | None = None,
    ) -> None:
        self.texture = texture
        self.ticks_per_frame = ticks_per_frame
        self.frame_count = frame_count
        self.frame_width = frame_width
        self.frame_height = frame_height
        self.offset = offset if offset is not None else (0, 0)
        self._ticker = 0
        self._reversed = False

    def current_frame(self) -> int:
        """Index of the frame currently shown."""
        return self._ticker // self.ticks_per_frame

    def tick(self) -> None:
        """Advance one tick, turning around at either end of the strip."""
        if self._reversed:
            self._ticker -= 1
            if self._ticker == 0:
                self._reversed = False
        else:
            self._ticker += 1
            if self._ticker + 1 == self.ticks_per_frame * self.frame_count:
                self._reversed = True

    def frame_rect(self, frame: int) -> pygame.Rect:
        """The area of the texture holding the given frame."""
        if not 0 <= frame < self.frame_count:
            raise IndexError(f"Frame {frame} is out of bounds for this texture")
        return pygame.Rect(frame * self.frame_width, 0, self.frame_width, self.frame_height)

    def render(
        self, surface: pygame.Surface, position: tuple[int, int], direction: Direction
    ) -> None:
        """Draw the current frame and advance the animation."""
        self.render_static(surface, position, direction, self.current_frame())
        self.tick()

    def render_until(
        self,
        surface: pygame.Surface,
        position: tuple[int, int],
        direction: Direction,
        frame: int,
    ) -> None:
        """Draw the current frame, advancing only while the target frame is not shown."""
        current = self.current_frame()
        self.render_static(surface, position, direction, current)
        if frame != current:
            self.tick()

    def render_static(
        self,
        surface: pygame.Surface,
        position: tuple[int, int],
        direction: Direction,
        frame: int | None = None,
    ) -> None:
        """Draw one frame (the current one by default) without advancing."""
        source = self.frame_rect(self.current_frame() if frame is None else frame)
        destination = pygame.Rect(
            position[0] + self.offset[0],
            position[1] + self.offset[1],
            self.frame_width,
            self.frame_height,
        )
        image = self.texture.subsurface(source)
        angle = direction.angle()
        if angle:
            # pygame rotates counter-clockwise; direction angles are clockwise.
            image = pygame.transform.rotate(image, -angle)
        surface.blit(image, image.get_rect(center=destination.center))