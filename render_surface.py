# render_surface.py

import logging
import math

import pygame

logger = logging.getLogger("circle_sim")

class PygameSurface:
    """
    Immediate-mode drawing primitives on top of a pygame Surface.

    Data Contract:
    - Inputs:
        - target (pygame.Surface): The surface to draw on, usually the display.
        - background_color: Anything pygame.Color accepts. Used by clear_area().
    - Side Effects: Draws directly on `target`. Nothing is retained between calls.
    - Invariants: `target` may be replaced (e.g. after a window resize); every
      call draws on whatever `target` is at that moment.
    """
    def __init__(self, target: pygame.Surface, background_color):
        self.target = target
        self.background_color = pygame.Color(background_color)

    def clear_area(self, width: float, height: float):
        """Fills the region (0, 0, width, height) with the background color."""
        rect = pygame.Rect(0, 0, int(math.ceil(width)), int(math.ceil(height)))
        self.target.fill(self.background_color, rect)

    def draw_disk(self, x: float, y: float, radius: float, fill_color, stroke_color, lighten: bool = False):
        """
        Fills and strokes a disk centered at (x, y).

        Translucent fills are alpha-blended over what is already drawn. With
        lighten=True they are instead combined by taking the per-channel
        maximum of the (alpha-weighted) fill and the existing pixel.
        """
        fill = pygame.Color(fill_color)
        stroke = pygame.Color(stroke_color)
        center = (int(round(x)), int(round(y)))
        pixel_radius = max(1, int(round(radius)))

        if fill.a == 255 and not lighten:
            pygame.draw.circle(self.target, fill, center, pixel_radius)
        else:
            self._blit_translucent_disk(center, pixel_radius, fill, lighten)

        pygame.draw.circle(self.target, stroke, center, pixel_radius, 1)

    def _blit_translucent_disk(self, center, pixel_radius, fill, lighten):
        size = pixel_radius * 2 + 2
        local_center = (pixel_radius + 1, pixel_radius + 1)
        top_left = (center[0] - local_center[0], center[1] - local_center[1])

        if lighten:
            # Pre-multiply by alpha; black outside the disk leaves the max unchanged.
            weight = fill.a / 255
            premultiplied = (int(fill.r * weight), int(fill.g * weight), int(fill.b * weight))
            layer = pygame.Surface((size, size))
            layer.fill((0, 0, 0))
            pygame.draw.circle(layer, premultiplied, local_center, pixel_radius)
            self.target.blit(layer, top_left, special_flags=pygame.BLEND_RGB_MAX)
        else:
            layer = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(layer, fill, local_center, pixel_radius)
            self.target.blit(layer, top_left)
