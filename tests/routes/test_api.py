from qbtrust.models import TrustSnapshot, Vote


def test_list_quarterbacks(client, make_quarterback):
    make_quarterback(name="Lamar Jackson", team="Baltimore Ravens")
    make_quarterback(name="Benched", is_active=False)

    response = client.get("/api/qbs")
    assert response.status_code == 200
    data = response.get_json()
    assert [row["name"] for row in data] == ["Lamar Jackson"]
    assert data[0]["trust_score"] == 50.0
    assert data[0]["slug"] == "lamar-jackson"
    assert data[0]["recent_vote_count"] == 0


def test_detail_and_missing_quarterback(client, quarterback):
    response = client.get(f"/api/qbs/{quarterback.id}")
    assert response.status_code == 200
    assert response.get_json()["name"] == "Josh Allen"

    response = client.get("/api/qbs/9999")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Quarterback not found"}


def test_by_slug(client, quarterback):
    response = client.get("/api/qbs/by-slug/josh-allen")
    assert response.status_code == 200
    assert response.get_json()["id"] == quarterback.id

    assert client.get("/api/qbs/by-slug/nobody").status_code == 404


def test_vote_then_history(client, quarterback):
    response = client.post(f"/api/qbs/{quarterback.id}/vote", json={"direction": "more"})
    assert response.status_code == 200
    data = response.get_json()
    assert data["trust_score"] == 52.4
    assert data["recent_vote_count"] == 1
    assert data["cooldown_seconds"] == 300

    response = client.get(f"/api/qbs/{quarterback.id}/history")
    assert response.status_code == 200
    history = response.get_json()
    assert len(history) == 1
    assert history[0]["score"] == 52.4
    assert history[0]["live"] is False


def test_vote_rejects_bad_direction(client, quarterback):
    response = client.post(f"/api/qbs/{quarterback.id}/vote", json={"direction": "up"})
    assert response.status_code == 400
    assert "more" in response.get_json()["error"]

    response = client.post(f"/api/qbs/{quarterback.id}/vote", data="not json")
    assert response.status_code == 400
    assert Vote.query.count() == 0


def test_vote_for_missing_quarterback(client, db_session):
    response = client.post("/api/qbs/42/vote", json={"direction": "less"})
    assert response.status_code == 404


def test_history_rejects_non_positive_days(client, quarterback):
    response = client.get(f"/api/qbs/{quarterback.id}/history?days=0")
    assert response.status_code == 400


def test_movers_empty_without_history(client, quarterback):
    response = client.get("/api/qbs/movers")
    assert response.status_code == 200
    assert response.get_json() == {"risers": [], "fallers": []}


def test_cron_snapshot_requires_secret_when_configured(app, client, quarterback):
    app.config["CRON_SECRET"] = "s3cret"

    assert client.get("/api/cron/snapshot").status_code == 401

    response = client.get(
        "/api/cron/snapshot", headers={"Authorization": "Bearer s3cret"}
    )
    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is True
    assert data["snapshots"][0]["qb_id"] == quarterback.id
    assert TrustSnapshot.query.count() == 1


def test_admin_sync_preview_and_run(client, db_session):
    preview = client.get("/api/admin/sync-qbs").get_json()
    assert preview["count"] == 32
    assert "confirm=true" in preview["message"]

    result = client.get("/api/admin/sync-qbs?confirm=true").get_json()
    assert result["success"] is True
    assert result["summary"]["added"] == 32
    assert len(client.get("/api/qbs").get_json()) == 32


def test_admin_cleanup_preview_and_fix(client, make_quarterback):
    make_quarterback(name="Dak Prescott")
    make_quarterback(name="Dak Prescott")

    preview = client.get("/api/admin/cleanup").get_json()
    assert preview["total"] == 2

    result = client.get("/api/admin/cleanup?fix=true").get_json()
    assert result["deleted"] == 1
    assert result["remaining"] == 1
