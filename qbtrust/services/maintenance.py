from flask import current_app

from qbtrust.data.roster import headshot_url
from qbtrust.extensions import db
from qbtrust.models import Quarterback, TrustSnapshot, Vote
from qbtrust.services.snapshots import seed_initial_snapshots
from qbtrust.services.trust import DEFAULT_SCORE


def sync_roster(roster, now=None):
    results = {"updated": [], "added": [], "deactivated": []}

    current = Quarterback.query.order_by(Quarterback.id).all()

    # Park every espn_id so swapped ids never collide on the unique index.
    for quarterback in current:
        quarterback.espn_id = f"temp_{quarterback.id}"
    db.session.flush()

    by_name = {}
    for quarterback in current:
        by_name.setdefault(quarterback.name, quarterback)

    kept_ids = set()
    seen_names = set()
    for entry in roster:
        name = entry["name"]
        if name in seen_names:
            continue
        seen_names.add(name)

        image = entry.get("headshot_url") or headshot_url(entry["espn_id"])
        existing = by_name.get(name)
        if existing:
            existing.team = entry["team"]
            existing.espn_id = entry["espn_id"]
            existing.headshot_url = image
            existing.is_active = True
            kept_ids.add(existing.id)
            results["updated"].append(
                f"{name}: team={entry['team']}, espn_id={entry['espn_id']}"
            )
        else:
            db.session.add(
                Quarterback(
                    name=name,
                    team=entry["team"],
                    espn_id=entry["espn_id"],
                    headshot_url=image,
                    trust_score=float(DEFAULT_SCORE),
                    is_active=True,
                )
            )
            results["added"].append(name)
        db.session.flush()

    for quarterback in current:
        if quarterback.id not in kept_ids and quarterback.is_active:
            quarterback.is_active = False
            results["deactivated"].append(quarterback.name)

    db.session.commit()
    seed_initial_snapshots(now)

    current_app.logger.info(
        "Roster sync: %d updated, %d added, %d deactivated",
        len(results["updated"]),
        len(results["added"]),
        len(results["deactivated"]),
    )
    return results


def find_duplicate_quarterbacks():
    seen = set()
    duplicates = []
    for quarterback in Quarterback.query.order_by(Quarterback.name, Quarterback.id):
        if quarterback.name in seen:
            duplicates.append(quarterback)
        else:
            seen.add(quarterback.name)
    return duplicates


def remove_duplicate_quarterbacks():
    total = Quarterback.query.count()
    duplicate_ids = [quarterback.id for quarterback in find_duplicate_quarterbacks()]

    if duplicate_ids:
        Vote.query.filter(Vote.qb_id.in_(duplicate_ids)).delete(
            synchronize_session=False
        )
        TrustSnapshot.query.filter(TrustSnapshot.qb_id.in_(duplicate_ids)).delete(
            synchronize_session=False
        )
        Quarterback.query.filter(Quarterback.id.in_(duplicate_ids)).delete(
            synchronize_session=False
        )
        db.session.commit()
        db.session.expire_all()

    current_app.logger.info("Removed %d duplicate quarterbacks", len(duplicate_ids))
    return {
        "deleted": len(duplicate_ids),
        "deleted_ids": duplicate_ids,
        "remaining": total - len(duplicate_ids),
    }
