"""Histogrammer: letter-frequency histograms rendered as ASCII bar charts."""

__version__ = "0.1.0"
