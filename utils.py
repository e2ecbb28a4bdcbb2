# utils.py

from typing import List, Sequence, Tuple

from engine import StepResult

EMPTY_FRAME = "-"

# Frame cell status -> color
FRAME_COLORS = {
    "empty": "#f2f3f4",
    "idle": "#d5dbdb",
    "miss": "#f1948a",
    "hit": "#82e0aa",
}

# Ordering used for the heatmap color scale
STATUS_CODES = {"empty": 0, "idle": 1, "miss": 2, "hit": 3}


def get_color(status):
    """Return a color for a frame cell status."""
    return FRAME_COLORS[status]


def format_token(token):
    if token is None:
        return EMPTY_FRAME
    return str(token)


def frame_statuses(step: StepResult, capacity: int) -> List[str]:
    """
    Per-frame highlight for one step, top frame first.

    On a hit every occupied frame is marked "hit". On a miss only frames
    whose content changed are marked "miss"; other occupied frames are
    "idle" and unused frames are "empty".
    """
    statuses = []
    for i in range(capacity):
        if i >= len(step.after):
            statuses.append("empty")
        elif step.is_hit:
            statuses.append("hit")
        elif i >= len(step.before) or step.before[i] != step.after[i]:
            statuses.append("miss")
        else:
            statuses.append("idle")
    return statuses


def frame_labels(step: StepResult, capacity: int) -> List[str]:
    return [
        format_token(step.after[i]) if i < len(step.after) else EMPTY_FRAME
        for i in range(capacity)
    ]


def frame_grid(steps: Sequence[StepResult], capacity: int) -> Tuple[List[List[str]], List[List[int]]]:
    """
    Build the frame table shown as a heatmap: one row per frame, one column
    per step.

    Returns:
        Tuple of (labels, codes), both indexed [frame][step]
    """
    labels = [[] for _ in range(capacity)]
    codes = [[] for _ in range(capacity)]
    for step in steps:
        for i, (label, status) in enumerate(zip(frame_labels(step, capacity),
                                                frame_statuses(step, capacity))):
            labels[i].append(label)
            codes[i].append(STATUS_CODES[status])
    return labels, codes


def recent_events(events: Sequence[str], limit: int) -> List[str]:
    """The last `limit` events, newest first."""
    if limit <= 0:
        return []
    return list(events[-limit:])[::-1]
