"""
Enhancement simulation.

Builds the result of an "AI enhancement" run: a processing time, per-area
improvement percentages and a before/after overall score. The enhanced file is
only a new object path; no pixels are changed.
"""

from __future__ import annotations

import asyncio
import random
from typing import Any, Dict, List, Optional


def enhanced_file_url(file_url: str) -> str:
    return f"enhanced/{file_url}"


class EnhancementSimulator:
    """Generates enhancement results with an injectable random source."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def _draw(self, base: int, span: int) -> int:
        return base + self._rng.randrange(span)

    def simulate(self, file_url: str, enhancements: List[str]) -> Dict[str, Any]:
        """Produce the enhancement payload for one upload.

        Args:
            file_url: Storage path of the original upload
            enhancements: Requested improvements, echoed back

        Returns:
            Payload with ``processingTime`` in milliseconds and scores as integers
        """
        return {
            "originalFile": file_url,
            "enhancedFile": enhanced_file_url(file_url),
            "appliedEnhancements": list(enhancements),
            "processingTime": self._draw(1000, 3000),
            "improvements": {
                "contrast": self._draw(10, 20),
                "alignment": self._draw(15, 25),
                "spacing": self._draw(10, 15),
                "typography": self._draw(5, 20),
            },
            "beforeAfterComparison": {
                "overallScore": {
                    "before": self._draw(60, 20),
                    "after": self._draw(85, 15),
                },
            },
        }


async def wait_processing_time(results: Dict[str, Any]) -> None:
    """Sleep for the simulated processing time of an enhancement payload."""
    await asyncio.sleep(results["processingTime"] / 1000)
