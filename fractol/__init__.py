"""Interactive viewers for the Mandelbrot set and related fractals."""

__version__ = "1.0.0"
__all__ = ["__version__"]