"""Single-precision (float32) bit access, rounding, exponential, trigonometric and power functions."""

__version__ = "0.1.0"

__all__ = ["core", "rounding", "exponential", "trig", "power"]