"""Mandelbrot and Julia set rendering into in-memory images."""

__version__ = "0.1.0"