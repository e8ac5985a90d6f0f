"""Pet survival forecasts and TOPSIS ranking of pet options."""

__version__ = "0.1.0"
__all__ = ["cli", "survival", "topsis"]