"""HTTP tests for the JSON API against the in-memory Supabase client."""

import httpx

from supabase_fake import RejectedCredentials


class TestAuth:
    def test_routes_require_login(self, client):
        response = client.get("/api/board")

        assert response.status_code == 401
        assert response.get_json()["success"] is False

    def test_login_and_me(self, auth_client):
        response = auth_client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.get_json()["user"]["email"] == "boss@example.com"

    def test_login_failure_returns_message(self, client, fake_client):
        fake_client.auth_server.error = RejectedCredentials("Invalid login credentials")
        response = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "nope"})

        assert response.status_code == 401
        assert response.get_json() == {"success": False, "message": "Invalid login credentials"}

    def test_logout_clears_session(self, auth_client):
        assert auth_client.post("/api/auth/logout").status_code == 200

        assert auth_client.get("/api/employees").status_code == 401

    def test_each_client_keeps_its_own_user(self, app):
        alice = app.test_client()
        bob = app.test_client()
        assert alice.post("/api/auth/login", json={"email": "alice@example.com", "password": "x"}).status_code == 200
        assert bob.post("/api/auth/login", json={"email": "bob@example.com", "password": "x"}).status_code == 200

        assert alice.get("/api/auth/me").get_json()["user"]["email"] == "alice@example.com"
        assert bob.get("/api/auth/me").get_json()["user"]["email"] == "bob@example.com"

        assert bob.post("/api/auth/logout").status_code == 200

        assert alice.get("/api/auth/me").get_json()["user"]["email"] == "alice@example.com"
        assert alice.get("/api/employees").status_code == 200
        assert bob.get("/api/auth/me").status_code == 401

    def test_me_with_revoked_token_ends_session(self, auth_client, fake_client):
        fake_client.auth_server.revoked.update(fake_client.auth_server.tokens)

        response = auth_client.get("/api/auth/me")

        assert response.status_code == 401
        assert auth_client.get("/api/employees").status_code == 401

    def test_login_rejects_non_json(self, client):
        response = client.post("/api/auth/login", data="email=x", content_type="text/plain")

        assert response.status_code == 400


class TestBoard:
    def test_full_board(self, auth_client):
        data = auth_client.get("/api/board").get_json()

        assert [e["name"] for e in data["employees"]] == ["Alice", "Bob"]
        alice, bob = data["employees"]
        assert alice["total_hours"] == 10
        assert [s["date"] for s in alice["days"]["7"]] == ["2026-03-08"]
        assert bob["total_hours"] == 9
        assert len(bob["days"]["3"]) == 1
        assert len(bob["days"]["2"]) == 1

    def test_week_board(self, auth_client):
        data = auth_client.get("/api/board?week_of=2026-03-05").get_json()

        bob = data["employees"][1]
        assert bob["total_hours"] == 8
        assert bob["days"]["2"] == []

    def test_bad_week_is_rejected(self, auth_client):
        response = auth_client.get("/api/board?week_of=next-week")

        assert response.status_code == 400

    def test_malformed_stored_shift_is_bad_gateway(self, auth_client, fake_client):
        fake_client.tables["shifts"][0]["segments"] = [{"start": "9am", "end": "12:00"}]

        response = auth_client.get("/api/board")

        assert response.status_code == 502
        assert response.get_json() == {"success": False, "message": "Malformed row in shifts"}

    def test_unreachable_store_is_bad_gateway(self, auth_client, fake_client):
        fake_client.failures[("employees", "select")] = httpx.ConnectError("connection refused")

        response = auth_client.get("/api/board")

        assert response.status_code == 502
        assert response.get_json() == {"success": False, "message": "connection refused"}


class TestShifts:
    def test_range(self, auth_client):
        data = auth_client.get("/api/shifts?start=2026-03-04&end=2026-03-08").get_json()

        assert sorted(s["id"] for s in data["shifts"]) == [11, 12]

    def test_range_requires_both_bounds(self, auth_client):
        assert auth_client.get("/api/shifts?start=2026-03-04").status_code == 400

    def test_save_and_delete(self, auth_client, fake_client):
        response = auth_client.put(
            "/api/shifts",
            json={"employee_id": 2, "date": "2026-03-06", "segments": [{"start": "12:00", "end": "15:30"}]},
        )
        assert response.status_code == 200
        assert response.get_json()["shift"]["segments"] == [{"start": "12:00", "end": "15:30"}]

        response = auth_client.delete("/api/shifts/2/2026-03-06")
        assert response.status_code == 200
        assert not any(r["date"] == "2026-03-06" for r in fake_client.tables["shifts"])

    def test_delete_rejects_trailing_garbage_in_date(self, auth_client, fake_client):
        response = auth_client.delete("/api/shifts/1/2026-03-08GARBAGE")

        assert response.status_code == 400
        assert any(r["employee_id"] == 1 and r["date"] == "2026-03-08" for r in fake_client.tables["shifts"])
        assert not any(c["op"] == "delete" for c in fake_client.calls)

    def test_save_rejects_seconds(self, auth_client, fake_client):
        response = auth_client.put(
            "/api/shifts",
            json={"employee_id": 2, "date": "2026-03-06", "segments": [{"start": "08:30:15", "end": "12:00"}]},
        )

        assert response.status_code == 400
        assert not any(r["date"] == "2026-03-06" for r in fake_client.tables["shifts"])

    def test_save_validation_error(self, auth_client):
        response = auth_client.put("/api/shifts", json={"employee_id": 2, "date": "2026-03-06", "segments": []})

        assert response.status_code == 400
        assert response.get_json()["message"] == "At least one segment is required"

    def test_store_failure_maps_to_bad_gateway(self, auth_client, fake_client):
        fake_client.failures[("shifts", "upsert")] = "violates foreign key constraint"

        response = auth_client.put(
            "/api/shifts",
            json={"employee_id": 99, "date": "2026-03-06", "segments": [{"start": "12:00", "end": "15:00"}]},
        )

        assert response.status_code == 502
        assert response.get_json() == {"success": False, "message": "violates foreign key constraint"}


class TestEmployees:
    def test_list_add_delete(self, auth_client, fake_client):
        assert [e["id"] for e in auth_client.get("/api/employees").get_json()["employees"]] == [1, 2]

        response = auth_client.post("/api/employees", json={"name": "Dana"})
        assert response.status_code == 201
        assert response.get_json()["employee"]["status"] == "normal"

        response = auth_client.delete("/api/employees/1")
        assert response.status_code == 200
        assert all(r["employee_id"] != 1 for r in fake_client.tables["shifts"])
        assert all(r["id"] != 1 for r in fake_client.tables["employees"])

    def test_delete_stops_when_shift_delete_fails(self, auth_client, fake_client):
        fake_client.failures[("shifts", "delete")] = "timeout"

        response = auth_client.delete("/api/employees/1")

        assert response.status_code == 502
        assert any(r["id"] == 1 for r in fake_client.tables["employees"])
        assert [c["table"] for c in fake_client.calls if c["op"] == "delete"] == ["shifts"]


class TestPresets:
    def test_crud(self, auth_client, fake_client):
        names = [p["name"] for p in auth_client.get("/api/presets").get_json()["presets"]]
        assert names == ["Morning", "Closing"]

        response = auth_client.post("/api/presets", json={"name": "Night", "segments": [{"start": "22:00", "end": "06:00"}]})
        assert response.status_code == 201
        preset_id = response.get_json()["preset"]["id"]

        assert auth_client.delete(f"/api/presets/{preset_id}").status_code == 200
        assert [r["name"] for r in fake_client.tables["shift_presets"]] == ["Closing", "Morning"]

    def test_extra_fields_are_stored_and_returned(self, auth_client, fake_client):
        response = auth_client.post(
            "/api/presets",
            json={"name": "Late", "segments": [{"start": "16:00", "end": "22:00"}], "color": "#ff8800"},
        )

        assert response.status_code == 201
        assert response.get_json()["preset"]["color"] == "#ff8800"
        assert fake_client.tables["shift_presets"][-1]["color"] == "#ff8800"
        listed = {p["name"]: p for p in auth_client.get("/api/presets").get_json()["presets"]}
        assert listed["Late"]["color"] == "#ff8800"


def test_manifest_is_public(client):
    response = client.get("/manifest.webmanifest")

    assert response.status_code == 200
    assert response.mimetype == "application/manifest+json"
    data = response.get_json(force=True)
    assert data["name"] == "Shift Helper (test)"
    assert data["theme_color"] == "#000000"
    assert data["short_name"] == "Shifts"


def test_unknown_route_is_json(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["success"] is False
