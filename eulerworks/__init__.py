"""Number-theory puzzle solutions and a rational-root finder for cubics."""

__version__ = "1.0.0"