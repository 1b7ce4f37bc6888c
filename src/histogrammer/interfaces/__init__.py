"""User-facing interfaces for Histogrammer."""
