from datetime import timedelta

MOVEMENT_WINDOW_DAYS = 7


def pick_baseline_snapshot(snapshots, now, window_days=MOVEMENT_WINDOW_DAYS):
    """Latest snapshot on or before ``now - window_days``.

    Falls back to the earliest snapshot when none is that old, and to
    ``None`` when there are no snapshots at all.
    """
    if not snapshots:
        return None

    cutoff = (now - timedelta(days=window_days)).date()
    ordered = sorted(snapshots, key=lambda snapshot: snapshot.snapshot_date)

    baseline = None
    for snapshot in ordered:
        if snapshot.snapshot_date > cutoff:
            break
        baseline = snapshot

    return baseline if baseline is not None else ordered[0]


def compute_movement(current_score, snapshots, now, window_days=MOVEMENT_WINDOW_DAYS):
    baseline = pick_baseline_snapshot(snapshots, now, window_days)
    if baseline is None:
        return 0.0
    return round(current_score - baseline.score, 1)
