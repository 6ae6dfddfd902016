# errors.py

"""
Exception types raised by the circle engine.

- EngineStateError: an operation ran before the thing it depends on existed
  (render surface, viewport bounds, circle set) or in the wrong driver state.
  Initialization order is surface -> bounds -> circles -> loop start.
- ConfigurationError: an externally supplied value (circle count, speed,
  viewport size, marker color) was rejected. The engine state is left as it was.
"""


class EngineStateError(RuntimeError):
    pass


class ConfigurationError(ValueError):
    pass
