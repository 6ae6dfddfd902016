# animation_driver.py

import enum
import logging

import pygame

import constants
from circle_system import CircleSystem, validate_circle_count, validate_circle_speed
from errors import ConfigurationError, EngineStateError

logger = logging.getLogger("circle_sim")


class DriverState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class PygameFrameScheduler:
    """
    Frame-scheduling port for a pygame main loop.

    Holds at most one pending callback. The main loop calls run_pending() once
    per frame, which invokes the callback scheduled during the previous frame.

    Data Contract:
    - schedule_next_tick(callback) -> int: Replaces any pending callback.
      Returns a handle; handles increase monotonically.
    - cancel_scheduled_tick(handle): Drops the pending callback if `handle`
      is still the pending one. Stale handles are ignored.
    - run_pending() -> bool: True if a callback ran.
    """
    def __init__(self):
        self._next_handle = 0
        self._pending = None

    def schedule_next_tick(self, callback):
        self._next_handle += 1
        self._pending = (self._next_handle, callback)
        return self._next_handle

    def cancel_scheduled_tick(self, handle):
        if self._pending is not None and self._pending[0] == handle:
            self._pending = None

    @property
    def has_pending(self):
        return self._pending is not None

    def run_pending(self):
        if self._pending is None:
            return False
        _, callback = self._pending
        self._pending = None
        callback()
        return True


class AnimationDriver:
    """
    Runs the per-frame loop: clear, advance and draw circles, then draw the
    intersection markers of every overlapping pair, then schedule the next frame.

    Data Contract:
    - Inputs:
        - surface: Render surface with draw_disk(...) and clear_area(...).
        - scheduler: Frame-scheduling port with schedule_next_tick(callback)
          and cancel_scheduled_tick(handle).
        - circle_system (CircleSystem): The engine context owned by this driver.
        - circle_count (int), circle_speed (float): Used for every regeneration.
        - intersection_fill_color: Marker fill color, anything pygame.Color accepts.
    - States: IDLE (nothing scheduled) and RUNNING (next tick scheduled).
    - Invariants:
        - While RUNNING exactly one tick is pending between frames.
        - Resize and regeneration replace the circle set without changing state.
    """
    def __init__(self, surface, scheduler, circle_system: CircleSystem,
                 circle_count: int, circle_speed: float, intersection_fill_color):
        self.surface = surface
        self.scheduler = scheduler
        self.circle_system = circle_system
        self.circle_count = validate_circle_count(circle_count)
        self.circle_speed = validate_circle_speed(circle_speed)
        self.intersection_fill_color = self._parse_color(intersection_fill_color)
        self.circle_stroke_color = pygame.Color(*constants.CIRCLE_STROKE_COLOR)
        self.intersection_stroke_color = pygame.Color(*constants.INTERSECTION_STROKE_COLOR)

        self.state = DriverState.IDLE
        self.frame = 0
        self.last_intersections = []
        self._pending_handle = None

    @staticmethod
    def _parse_color(value):
        try:
            return pygame.Color(value)
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid intersection color {value!r}: {e}") from e

    # --- Configuration surface ---

    def set_circle_count(self, circle_count: int):
        """Takes effect at the next regeneration."""
        self.circle_count = validate_circle_count(circle_count)
        logger.info(f"Circle count set to {self.circle_count}.")

    def set_circle_speed(self, circle_speed: float):
        """Only circles created after this call use the new speed."""
        self.circle_speed = validate_circle_speed(circle_speed)
        logger.info(f"Circle speed set to {self.circle_speed}.")

    def set_intersection_fill_color(self, color):
        """Applies to every marker drawn from now on."""
        self.intersection_fill_color = self._parse_color(color)
        logger.info(f"Intersection fill color set to {tuple(self.intersection_fill_color)}.")

    # --- Reset events ---

    def resize(self, width: float, height: float):
        """Viewport changed: new bounds and a complete new circle set."""
        self.circle_system.set_bounds(width, height)
        logger.info(f"Viewport resized to {width}x{height}.")
        self.regenerate()

    def regenerate(self):
        self.circle_system.create_circles(self.circle_count, self.circle_speed)

    # --- Lifecycle ---

    def start(self):
        """IDLE -> RUNNING. Draws the first frame immediately."""
        if self.state is DriverState.RUNNING:
            return
        self._require_ready()
        self.state = DriverState.RUNNING
        logger.info("Animation started.")
        self.tick()

    def stop(self):
        """RUNNING -> IDLE. Cancels the pending tick."""
        if self.state is DriverState.IDLE:
            return
        if self._pending_handle is not None:
            self.scheduler.cancel_scheduled_tick(self._pending_handle)
            self._pending_handle = None
        self.state = DriverState.IDLE
        logger.info(f"Animation stopped after {self.frame} frames.")

    def _require_ready(self):
        if self.surface is None:
            raise EngineStateError("No render surface attached.")
        self.circle_system.require_bounds()
        self.circle_system.require_circles()

    def tick(self):
        """
        One complete frame. Runs to completion before the next one is scheduled.
        """
        if self.state is not DriverState.RUNNING:
            raise EngineStateError("tick() called while the driver is not running.")
        self._pending_handle = None
        self._require_ready()

        width, height = self.circle_system.bounds
        circles = self.circle_system.circles

        # --- 1. Clear ---
        self.surface.clear_area(width, height)

        # --- 2. Advance and draw circles ---
        for circle in circles:
            self.circle_system.advance(circle)
            x, y = circle.position
            self.surface.draw_disk(x, y, circle.radius, circle.color, self.circle_stroke_color, lighten=True)

        # --- 3. Detect and draw intersections on the updated positions ---
        intersections = self.circle_system.find_intersections()
        dot_radius = self.circle_system.intersection_dot_radius
        for hit in intersections:
            for point in (hit.first, hit.second):
                self.surface.draw_disk(
                    point[0], point[1], dot_radius,
                    self.intersection_fill_color, self.intersection_stroke_color
                )
        self.last_intersections = intersections

        # --- Logging (throttled) ---
        if self.frame % constants.LOG_EVERY_N_TICKS == 0:
            logger.debug(
                f"Frame={self.frame}, "
                f"Circles={len(circles)}, "
                f"IntersectingPairs={len(intersections)}"
            )
        self.frame += 1

        # --- 4. Schedule the next frame ---
        self._pending_handle = self.scheduler.schedule_next_tick(self.tick)
