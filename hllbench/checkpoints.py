"""Positions in a stream at which a sketch is sampled."""

from __future__ import annotations

__all__ = ["build_checkpoints"]


def build_checkpoints(total: int, step_percent: int) -> list[int]:
    """Return increasing stream positions every ``step_percent`` percent of ``total``.

    Positions are clamped to ``[1, total]``, duplicates are dropped, and the
    list always ends with ``total``. An empty stream has no checkpoints; a
    non-positive step yields only the final position.
    """
    if total == 0:
        return []
    if step_percent <= 0:
        return [total]

    points: list[int] = []
    for percent in range(step_percent, 101, step_percent):
        position = min(max(percent * total // 100, 1), total)
        if not points or points[-1] != position:
            points.append(position)

    if not points or points[-1] != total:
        points.append(total)
    return points