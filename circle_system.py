# circle_system.py

import logging
import math

import numpy as np
import pygame

import constants
from circle import Circle
from errors import ConfigurationError, EngineStateError
from intersection import find_intersections

logger = logging.getLogger("circle_sim")


def validate_circle_count(count):
    """Returns count as an int, or raises ConfigurationError if it is not a positive integer."""
    if isinstance(count, bool) or not isinstance(count, (int, np.integer, float)):
        raise ConfigurationError(f"Circle count must be a positive integer, got {count!r}.")
    if isinstance(count, float) and not count.is_integer():
        raise ConfigurationError(f"Circle count must be a positive integer, got {count!r}.")
    if count < 1:
        raise ConfigurationError(f"Circle count must be a positive integer, got {count!r}.")
    return int(count)


def validate_circle_speed(speed):
    """Returns speed as a float, or raises ConfigurationError if it is negative or not finite."""
    if isinstance(speed, bool) or not isinstance(speed, (int, float, np.integer, np.floating)):
        raise ConfigurationError(f"Circle speed must be a non-negative number, got {speed!r}.")
    speed = float(speed)
    if not math.isfinite(speed) or speed < 0:
        raise ConfigurationError(f"Circle speed must be a non-negative number, got {speed!r}.")
    return speed


def random_color(rng, alpha: float):
    """
    Random-hue color with fixed saturation and lightness.

    - Inputs:
        - rng: Random source with uniform(low, high).
        - alpha (float): Opacity in [0, 1].
    - Outputs: (r, g, b, a) tuple of ints in [0, 255].
    """
    hue = rng.uniform(0.0, 360.0)
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360.0, constants.COLOR_SATURATION, constants.COLOR_LIGHTNESS, alpha * 100)
    return (color.r, color.g, color.b, color.a)


class CircleSystem:
    """
    Owns the viewport bounds and the current set of circles.

    This is the engine context every frame operation works on. The circle set
    is an immutable tuple that is only ever replaced as a whole, so a frame in
    progress never sees a half-built set.

    Data Contract:
    - Inputs:
        - rng: Random source with uniform(low, high). A np.random.Generator in
          production; tests inject scripted sources.
        - bounds (tuple | None): Optional initial (width, height).
    - Side Effects: Mutates circle positions and velocities during advance().
    - Invariants:
        - Every circle has radius in [min_radius, max_radius] and a center in
          [max_radius, dimension - max_radius] at creation.
        - intersection_dot_radius == min_radius / 20 once circles exist.
    """
    def __init__(self, rng, bounds: tuple = None):
        self.rng = rng
        self.bounds = None
        self.circles = None
        self.min_radius = None
        self.max_radius = None
        self.intersection_dot_radius = constants.DEFAULT_INTERSECTION_DOT_RADIUS

        if bounds is not None:
            self.set_bounds(*bounds)

        logger.info(f"CircleSystem created with bounds: {self.bounds}")

    def set_bounds(self, width: float, height: float):
        """Sets the viewport size. Existing circles are kept until the next create_circles()."""
        if not (math.isfinite(width) and math.isfinite(height) and width > 0 and height > 0):
            raise ConfigurationError(f"Viewport size must be positive, got {width}x{height}.")
        self.bounds = (float(width), float(height))
        logger.debug(f"Viewport bounds set to {self.bounds}")

    def require_bounds(self):
        if self.bounds is None:
            raise EngineStateError("Viewport bounds are not set. Call set_bounds() first.")
        return self.bounds

    def require_circles(self):
        if self.circles is None:
            raise EngineStateError("No circles exist yet. Call create_circles() first.")
        return self.circles

    def create_circles(self, count: int, speed: float):
        """
        Replaces the circle set with `count` new random circles moving at `speed`.

        Random draws per circle, in order: direction, hue, radius, x, y.
        The old set stays in place if any argument is rejected.
        """
        count = validate_circle_count(count)
        speed = validate_circle_speed(speed)
        width, height = self.require_bounds()

        shorter_side = min(width, height)
        max_radius = shorter_side / constants.MAX_RADIUS_DIVISOR
        min_radius = max_radius * constants.MIN_RADIUS_RATIO

        new_circles = []
        for _ in range(count):
            angle = self.rng.uniform(0.0, 2 * np.pi)
            color = random_color(self.rng, constants.CIRCLE_ALPHA)
            radius = self.rng.uniform(min_radius, max_radius)
            x = self.rng.uniform(max_radius, width - max_radius)
            y = self.rng.uniform(max_radius, height - max_radius)
            velocity = np.array([np.cos(angle), np.sin(angle)]) * speed
            new_circles.append(Circle(color, radius, np.array([x, y]), velocity))

        # --- Swap in the complete set at once ---
        self.max_radius = max_radius
        self.min_radius = min_radius
        self.intersection_dot_radius = min_radius / constants.DOT_RADIUS_DIVISOR
        self.circles = tuple(new_circles)

        logger.info(
            f"Created {count} circles (speed={speed}, radius range "
            f"[{min_radius:.1f}, {max_radius:.1f}]) for viewport {width:.0f}x{height:.0f}."
        )
        return self.circles

    def advance(self, circle: Circle):
        """Bounce test on the current position, then one Euler step."""
        width, height = self.require_bounds()
        circle.check_bounce(width, height)
        circle.update()

    def update(self):
        """Advances every circle by one frame without drawing."""
        for circle in self.require_circles():
            self.advance(circle)

    def find_intersections(self):
        """Intersections for the current positions of all circles."""
        circles = self.require_circles()
        if len(circles) < 2:
            return []
        positions = np.array([circle.position for circle in circles])
        radii = np.array([circle.radius for circle in circles])
        return find_intersections(positions, radii)
