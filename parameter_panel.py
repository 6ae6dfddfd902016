# parameter_panel.py

import logging

import pygame

import constants
from errors import ConfigurationError

logger = logging.getLogger("circle_sim")

HELP_TEXT = "Up/Down: count  Left/Right: speed  C: dot color  R/Enter: apply  H: hide"

class ParameterPanel:
    """
    Keyboard controls for the live-tunable values, drawn as a text overlay.

    Count and speed changes are stored on the driver and take effect when the
    circles are regenerated (R or Enter). The marker color applies at once.

    Data Contract:
    - Inputs:
        - driver (AnimationDriver): Receives all parameter changes.
        - count_step (int), speed_step (float): Increments per key press.
        - marker_colors (list): Palette cycled by the C key.
    - Side Effects: Calls setters on the driver; may regenerate its circles.
    """
    def __init__(self, driver, count_step: int = 1, speed_step: float = 0.1, marker_colors=None):
        self.driver = driver
        self.count_step = count_step
        self.speed_step = speed_step
        self.marker_colors = list(marker_colors or ["#ffffff"])
        self.color_index = 0
        self.visible = True
        self._font = None

    def handle_event(self, event) -> bool:
        """Returns True if the event was a panel key."""
        if event.type != pygame.KEYDOWN:
            return False

        if event.key == pygame.K_UP:
            self._apply(self.driver.set_circle_count, self.driver.circle_count + self.count_step)
        elif event.key == pygame.K_DOWN:
            self._apply(self.driver.set_circle_count, max(1, self.driver.circle_count - self.count_step))
        elif event.key == pygame.K_RIGHT:
            self._apply(self.driver.set_circle_speed, round(self.driver.circle_speed + self.speed_step, 6))
        elif event.key == pygame.K_LEFT:
            self._apply(self.driver.set_circle_speed, max(0.0, round(self.driver.circle_speed - self.speed_step, 6)))
        elif event.key == pygame.K_c:
            self.color_index = (self.color_index + 1) % len(self.marker_colors)
            self._apply(self.driver.set_intersection_fill_color, self.marker_colors[self.color_index])
        elif event.key in (pygame.K_r, pygame.K_RETURN):
            self.driver.regenerate()
        elif event.key == pygame.K_h:
            self.visible = not self.visible
        else:
            return False
        return True

    def _apply(self, setter, value):
        try:
            setter(value)
        except ConfigurationError as e:
            logger.warning(f"Rejected parameter change: {e}")

    def lines(self):
        """The overlay text, one entry per line."""
        color = self.driver.intersection_fill_color
        return [
            f"Circles: {self.driver.circle_count}",
            f"Speed: {self.driver.circle_speed:.2f}",
            f"Dot color: #{color.r:02x}{color.g:02x}{color.b:02x}",
            HELP_TEXT,
        ]

    def draw(self, target: pygame.Surface):
        if not self.visible:
            return
        if self._font is None:
            self._font = pygame.font.SysFont(None, constants.PANEL_FONT_SIZE)

        rendered = [self._font.render(line, True, constants.PANEL_TEXT_COLOR) for line in self.lines()]
        pad = constants.PANEL_PADDING
        width = max(text.get_width() for text in rendered) + pad * 2
        height = sum(text.get_height() for text in rendered) + pad * 2

        background = pygame.Surface((width, height), pygame.SRCALPHA)
        background.fill(constants.PANEL_BACKGROUND_COLOR)
        target.blit(background, (0, 0))

        y = pad
        for text in rendered:
            target.blit(text, (pad, y))
            y += text.get_height()
