"""Orchestration layer for the read, bin and render pipeline."""

from histogrammer.orchestration.coordinator import ChartResult, Coordinator

__all__ = [
    "ChartResult",
    "Coordinator",
]
