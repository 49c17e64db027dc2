from datetime import datetime, timezone

from flask import current_app, jsonify, request

from qbtrust.data.roster import STARTING_QBS
from qbtrust.models import Quarterback
from qbtrust.services.maintenance import remove_duplicate_quarterbacks, sync_roster
from qbtrust.services.snapshots import snapshot_all_quarterbacks


def _cron_authorized():
    secret = current_app.config.get("CRON_SECRET")
    if not secret:
        return True
    return request.headers.get("Authorization") == f"Bearer {secret}"


def register_admin_routes(app):
    @app.route("/api/cron/snapshot")
    def cron_snapshot():
        if not _cron_authorized():
            current_app.logger.warning(
                "Rejected snapshot request from %s", request.remote_addr
            )
            return jsonify({"error": "Unauthorized"}), 401

        snapshots = snapshot_all_quarterbacks()
        return jsonify(
            {
                "success": True,
                "message": f"Created {len(snapshots)} snapshots",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "snapshots": snapshots,
            }
        )

    @app.route("/api/admin/sync-qbs")
    def admin_sync_quarterbacks():
        if request.args.get("confirm") != "true":
            return jsonify(
                {
                    "message": "Add ?confirm=true to execute the sync",
                    "preview": STARTING_QBS,
                    "count": len(STARTING_QBS),
                }
            )

        results = sync_roster(STARTING_QBS)
        return jsonify(
            {
                "success": True,
                "results": results,
                "summary": {key: len(value) for key, value in results.items()},
            }
        )

    @app.route("/api/admin/cleanup")
    def admin_cleanup():
        if request.args.get("fix") != "true":
            quarterbacks = Quarterback.query.order_by(
                Quarterback.name, Quarterback.id
            ).all()
            return jsonify(
                {
                    "message": "Add ?fix=true to remove duplicates",
                    "total": len(quarterbacks),
                    "quarterbacks": [
                        {
                            "id": qb.id,
                            "name": qb.name,
                            "team": qb.team,
                            "espn_id": qb.espn_id,
                            "is_active": qb.is_active,
                        }
                        for qb in quarterbacks
                    ],
                }
            )

        result = remove_duplicate_quarterbacks()
        return jsonify({"success": True, **result})
