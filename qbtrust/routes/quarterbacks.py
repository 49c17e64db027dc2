from flask import current_app, jsonify, request

from qbtrust.services.quarterbacks import (
    get_quarterback,
    get_quarterback_by_slug,
    get_quarterback_detail,
    list_active_quarterbacks,
    record_vote,
    slugify_name,
    top_movers,
)
from qbtrust.services.snapshots import build_history_points, get_trust_history
from qbtrust.services.trust import compute_trust_score
from qbtrust.services.votes import load_votes
from qbtrust.timeutils import utcnow


def serialize_quarterback(row):
    quarterback = row["quarterback"]
    payload = {
        "id": quarterback.id,
        "name": quarterback.name,
        "slug": slugify_name(quarterback.name),
        "team": quarterback.team,
        "espn_id": quarterback.espn_id,
        "headshot_url": quarterback.headshot_url,
        "is_active": quarterback.is_active,
        "trust_score": row["trust_score"],
    }
    if "recent_vote_count" in row:
        payload["recent_vote_count"] = row["recent_vote_count"]
    if "movement" in row:
        payload["movement"] = row["movement"]
    return payload


def register_quarterback_routes(app):
    @app.route("/api/qbs")
    def list_quarterbacks():
        rows = list_active_quarterbacks()
        return jsonify([serialize_quarterback(row) for row in rows])

    @app.route("/api/qbs/movers")
    def quarterback_movers():
        movers = top_movers()
        return jsonify(
            {
                "risers": [serialize_quarterback(row) for row in movers["risers"]],
                "fallers": [serialize_quarterback(row) for row in movers["fallers"]],
            }
        )

    @app.route("/api/qbs/by-slug/<slug>")
    def quarterback_by_slug(slug):
        quarterback = get_quarterback_by_slug(slug)
        return jsonify(serialize_quarterback(get_quarterback_detail(quarterback.id)))

    @app.route("/api/qbs/<int:qb_id>")
    def quarterback_detail(qb_id):
        return jsonify(serialize_quarterback(get_quarterback_detail(qb_id)))

    @app.route("/api/qbs/<int:qb_id>/history")
    def quarterback_history(qb_id):
        quarterback = get_quarterback(qb_id)
        days = request.args.get(
            "days", default=current_app.config["HISTORY_DEFAULT_DAYS"], type=int
        )
        if days < 1:
            return jsonify({"error": "days must be a positive integer"}), 400

        now = utcnow()
        current_score = compute_trust_score(load_votes(quarterback.id), now)
        history = get_trust_history(quarterback.id, days)
        return jsonify(build_history_points(history, current_score, now))

    @app.route("/api/qbs/<int:qb_id>/vote", methods=["POST"])
    def vote_quarterback(qb_id):
        data = request.get_json(silent=True) or {}
        row = record_vote(qb_id, data.get("direction"))

        payload = serialize_quarterback(row)
        payload["cooldown_seconds"] = current_app.config["VOTE_COOLDOWN_SECONDS"]
        return jsonify(payload)
