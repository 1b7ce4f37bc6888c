"""Letter binning for Histogrammer."""

from __future__ import annotations

from histogrammer.core.models import Histogram
from histogrammer.infra.logging import get_logger

logger = get_logger(__name__)

# Symbols 'a' through 'z', in chart column order
ALPHABET: tuple[str, ...] = tuple(chr(ord("a") + i) for i in range(26))


def is_letter(char: str) -> bool:
    """Whether ``char`` is an ASCII letter (either case)."""
    return char.isascii() and char.isalpha()


class Binner:
    """Counts letter occurrences in a text, ignoring case.

    This is a pure function component: it keeps no state between calls.
    """

    def count(self, text: str) -> Histogram:
        """Bin every letter of ``text`` into a histogram.

        Args:
            text: Full input text. Characters that are not ASCII letters are skipped.

        Returns:
            Histogram with per-letter counts and the peak count.
        """
        frequencies: dict[str, int] = {}
        peak = 0
        total = 0

        for char in text:
            if not is_letter(char):
                continue
            symbol = char.lower()
            frequencies[symbol] = frequencies.get(symbol, 0) + 1
            peak = max(peak, frequencies[symbol])
            total += 1

        logger.debug("Binned input text", characters=len(text), letters=total, peak=peak)

        return Histogram(frequencies=frequencies, peak=peak, total=total)
