"""Core binning and chart rendering for Histogrammer."""

from .binner import ALPHABET, Binner
from .chart_renderer import ChartRenderer
from .models import Histogram, LayoutParams, Row

__all__ = [
    "ALPHABET",
    "Binner",
    "ChartRenderer",
    "Histogram",
    "LayoutParams",
    "Row",
]
