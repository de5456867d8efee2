from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Statistics:
    """Final figures for one completed test."""

    wpm: float
    duration: float
    words_typed: int
    accuracy: float
    correct_chars: int
    total_chars: int


def calculate_statistics(
    start_time: Optional[float],
    end_time: Optional[float],
    words_typed: int,
    correct_chars: int,
    total_chars: int,
) -> Statistics:
    """Compute WPM and accuracy, reporting 0 where a figure is undefined.

    * **duration** – seconds between first keystroke and completion, 2 decimals.
    * **WPM** – words typed / (duration / 60).
    * **accuracy** – correct characters / total characters × 100.
    """
    if start_time is None or end_time is None:
        duration = 0.0
    else:
        duration = round(max(end_time - start_time, 0.0), 2)

    wpm = round(words_typed / (duration / 60.0), 2) if duration > 0 else 0.0
    accuracy = round(correct_chars / total_chars * 100.0, 2) if total_chars > 0 else 0.0

    return Statistics(
        wpm=wpm,
        duration=duration,
        words_typed=words_typed,
        accuracy=accuracy,
        correct_chars=correct_chars,
        total_chars=total_chars,
    )
