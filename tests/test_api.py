from pollverify.main import create_app


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "operational"
    assert client.get("/health").json()["status"] == "healthy"


def test_current_user_hides_password(client):
    response = client.get("/api/users/current")
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "pollworker"
    assert body["fullName"] == "Alex Thomas"
    assert "password" not in body
    assert "passwordHash" not in body


def test_lookup_voter_by_card_number(client):
    response = client.get("/api/voters/100123")
    assert response.status_code == 200
    assert response.json()["name"] == "Sarah Johnson"
    assert response.json()["checkedIn"] is False

    missing = client.get("/api/voters/999999")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Voter not found"}


def test_create_voter_rejects_duplicates(client):
    payload = {
        "voterId": "200001",
        "name": "Dana Lee",
        "dateOfBirth": "01/02/1990",
        "address": "1 Elm St, Cityville",
        "precinct": "East District 4",
    }
    created = client.post("/api/voters", json=payload)
    assert created.status_code == 201
    assert created.json()["id"] == 6

    duplicate = client.post("/api/voters", json=payload)
    assert duplicate.status_code == 400
    assert "already exists" in duplicate.json()["message"]


def test_check_in_flow(client):
    response = client.post("/api/voters/1/check-in")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["voter"]["checkedIn"] is True
    assert body["voter"]["checkedInBy"] == 2
    assert body["checkInTime"].endswith(("AM", "PM"))

    stations = client.get("/api/stations").json()
    assert stations[0]["votersProcessed"] == 1
    assert stations[0]["operator"]["username"] == "pollworker"
    assert "passwordHash" not in stations[0]["operator"]
    assert stations[4]["operator"] is None


def test_check_in_unknown_voter(client):
    response = client.post("/api/voters/99/check-in")
    assert response.status_code == 404
    assert "message" in response.json()


def test_non_numeric_id_is_a_bad_request(client):
    response = client.post("/api/voters/abc/check-in")
    assert response.status_code == 400
    assert "message" in response.json()


def test_queue_flow(client):
    created = client.post("/api/queue", json={"voterId": 2, "number": 1})
    assert created.status_code == 201
    item = created.json()
    assert item["status"] == "waiting"
    assert item["type"] == "standard"

    updated = client.put(f"/api/queue/{item['id']}/status", json={"status": "completed", "userId": 2})
    assert updated.status_code == 200
    assert updated.json()["processedBy"] == 2
    assert updated.json()["processedAt"] is not None

    queue = client.get("/api/queue").json()
    assert queue[0]["voter"]["name"] == "Michael Brown"
    assert client.get("/api/queue/stats").json() == {"waiting": 0, "inProgress": 0, "completed": 1}


def test_queue_rejects_unknown_status(client):
    client.post("/api/queue", json={"number": 1})
    response = client.put("/api/queue/1/status", json={"status": "teleported"})
    assert response.status_code == 400


def test_station_status_update(client):
    response = client.put("/api/stations/5/status", json={"status": "active", "operatorId": 1})
    assert response.status_code == 200
    assert response.json()["operatorId"] == 1

    assert client.put("/api/stations/42/status", json={"status": "active"}).status_code == 404


def test_issue_flow(client):
    created = client.post("/api/issues", json={"type": "equipment", "description": "Printer jam", "reportedBy": 2})
    assert created.status_code == 201
    assert created.json()["status"] == "open"

    resolved = client.put(f"/api/issues/{created.json()['id']}/resolve", json={"userId": 2})
    assert resolved.status_code == 200
    assert resolved.json()["status"] == "resolved"
    assert resolved.json()["resolutionTime"] == 0

    assert client.put("/api/issues/99/resolve", json={"userId": 2}).status_code == 404
    assert client.post("/api/issues", json={"description": "no type"}).status_code == 400


def test_system_status(client):
    statuses = client.get("/api/system-status").json()
    assert len(statuses) == 6
    internet = next(s for s in statuses if s["component"] == "internet")
    assert internet["status"] == "degraded"

    updated = client.put(f"/api/system-status/{internet['id']}", json={"status": "operational"})
    assert updated.json()["status"] == "operational"
    assert updated.json()["notes"] == "Slow connection speeds"

    assert client.get(f"/api/system-status/{internet['id']}").json()["status"] == "operational"
    assert client.get("/api/system-status/99").status_code == 404


def test_alerts_and_messages(client):
    assert len(client.get("/api/alerts").json()) == 4
    created = client.post("/api/alerts", json={"type": "error", "title": "Scanner offline", "message": "Use manual lookup"})
    assert created.status_code == 201
    assert len(client.get("/api/alerts").json()) == 5
    assert client.post("/api/alerts", json={"type": "panic", "title": "x", "message": "y"}).status_code == 400

    message = client.post("/api/messages", json={"sender": "Precinct Captain", "message": "Lunch at noon"})
    assert message.status_code == 201
    assert client.get("/api/messages").json()[-1]["sender"] == "Precinct Captain"


def test_connection_status_toggle(client):
    assert client.get("/api/connection-status").json() == {"connected": True}
    assert client.post("/api/connection-status/toggle").json() == {"connected": False}
    assert client.get("/api/connection-status").json() == {"connected": False}
    assert client.post("/api/connection-status/toggle", json={"connected": True}).json() == {"connected": True}


def test_stats(client):
    recorded = client.post("/api/stats", json={"hour": 23, "votersProcessed": 50, "averageProcessingTime": 150})
    assert recorded.status_code == 201

    rows = client.get("/api/stats").json()
    assert rows[-1]["votersProcessed"] == 50

    summary = client.get("/api/stats/summary").json()
    assert set(summary) == {
        "totalVotersProcessed", "avgProcessingTime", "currentWaitTime",
        "currentThroughput", "peakHour", "specialCases",
    }
    assert summary["peakHour"] == "23:00"
    assert summary["specialCases"] == 0

    assert client.post("/api/stats", json={"hour": 24}).status_code == 400


def test_biometrics(client):
    seeded = client.get("/api/biometrics/voter/1").json()
    assert seeded["type"] == "facial_recognition"
    assert seeded["verified"] is True

    assert client.get("/api/biometrics/voter/5").status_code == 404

    created = client.post("/api/biometrics", json={"voterId": 5, "type": "fingerprint"})
    assert created.status_code == 201
    verified = client.put(f"/api/biometrics/{created.json()['id']}/verify")
    assert verified.json()["verified"] is True
    assert verified.json()["verifiedBy"] == 2

    assert client.post("/api/biometrics", json={"voterId": 5, "type": "retina"}).status_code == 400


def test_accessibility(client):
    seeded = client.get("/api/accessibility/voter/1").json()
    assert seeded["visualAssistance"] is True

    updated = client.put(f"/api/accessibility/{seeded['id']}", json={"languagePreference": "french"})
    assert updated.status_code == 200
    assert updated.json()["languagePreference"] == "french"
    assert updated.json()["visualAssistance"] is True
    assert updated.json()["otherNeeds"] == "Larger text on screen"

    assert client.get("/api/accessibility/voter/2").status_code == 404
    assert client.put("/api/accessibility/99", json={}).status_code == 404


def test_mobile_notification_flow(client):
    created = client.post("/api/mobile-notifications", json={
        "voterId": 3,
        "phoneNumber": "+15550001111",
        "optedIn": True,
    })
    assert created.status_code == 201
    notification = created.json()
    code = notification["verificationCode"]
    assert len(code) == 6 and code.isdigit()
    assert notification["notificationType"] == "sms"

    url = f"/api/mobile-notifications/{notification['id']}"
    blocked = client.post(f"{url}/send", json={"message": "Your turn is next"})
    assert blocked.status_code == 400
    assert blocked.json()["message"] == "Mobile number is not verified for notifications"

    wrong = client.post(f"{url}/verify", json={"verificationCode": "000000"})
    assert wrong.status_code == 400
    assert wrong.json()["message"] == "Invalid verification code"
    assert client.get("/api/mobile-notifications/voter/3").json()["verified"] is False

    verified = client.post(f"{url}/verify", json={"verificationCode": code})
    assert verified.json()["verified"] is True

    sent = client.post(f"{url}/send", json={"message": "Your turn is next"})
    assert sent.json() == {"success": True, "message": "Notification sent successfully"}
    assert client.get("/api/mobile-notifications/voter/3").json()["lastNotified"] is not None


def test_mobile_notification_validation(client):
    bad_email = client.post("/api/mobile-notifications", json={"voterId": 3, "email": "not-an-email"})
    assert bad_email.status_code == 400
    assert client.get("/api/mobile-notifications/voter/5").status_code == 404
    assert client.post("/api/mobile-notifications/99/verify", json={"verificationCode": "123456"}).status_code == 404


def test_anomalies(client):
    anomalies = client.get("/api/anomalies").json()
    assert len(anomalies) == 3
    assert anomalies[0]["status"] == "resolved"

    test_anomaly = client.post("/api/anomalies/test")
    assert test_anomaly.status_code == 201
    assert test_anomaly.json()["status"] == "detected"

    resolved = client.put("/api/anomalies/2/resolve", json={"userId": 1, "resolution": "Escalated to IT"})
    assert resolved.json()["status"] == "resolved"
    assert resolved.json()["actions"] == ["Escalated to IT"]

    again = client.put("/api/anomalies/2/resolve", json={"userId": 1, "resolution": "Scanner replaced"})
    assert again.json()["actions"] == ["Escalated to IT", "Scanner replaced"]

    assert client.put("/api/anomalies/2/resolve", json={"userId": 1, "resolution": ""}).status_code == 400
    assert client.put("/api/anomalies/50/resolve", json={"userId": 1, "resolution": "n/a"}).status_code == 404


def test_predictive_analytics(client):
    created = client.post("/api/predictive-analytics", json={
        "hourOfDay": 7,
        "dayOfWeek": 0,
        "predictedVoterVolume": 20,
        "predictedWaitTime": 10,
        "factorsConsidered": ["weather"],
    })
    assert created.status_code == 201
    analytic_id = created.json()["id"]

    updated = client.put(
        f"/api/predictive-analytics/{analytic_id}/update-actuals",
        json={"actualVoterVolume": 22, "actualWaitTime": 9},
    )
    assert updated.json()["accuracyPercentage"] == 90

    slot = client.get("/api/predictive-analytics/time-slot", params={"hourOfDay": 7, "dayOfWeek": 0})
    assert slot.status_code == 200
    assert slot.json()["id"] == analytic_id

    missing = client.get("/api/predictive-analytics/time-slot", params={"hourOfDay": 23, "dayOfWeek": 0})
    assert missing.status_code == 404
    assert missing.json()["message"] == "No prediction found for the specified time slot"

    invalid = client.get("/api/predictive-analytics/time-slot", params={"hourOfDay": 30, "dayOfWeek": 0})
    assert invalid.status_code == 400


def test_blockchain_transactions(client):
    assert len(client.get("/api/blockchain-transactions/voter/1").json()) == 3
    assert client.get("/api/blockchain-transactions/voter/4").json() == []

    by_hash = client.get("/api/blockchain-transactions/hash/0x3e7a12c5b8e90d6f2a193ea9fe12d4c78e1234f5a6b7c8d9")
    assert by_hash.json()["transactionType"] == "check_in"
    assert by_hash.json()["metadata"]["operator"] == "poll_worker_2"
    assert client.get("/api/blockchain-transactions/hash/0xdead").status_code == 404

    created = client.post("/api/blockchain-transactions", json={
        "transactionType": "check_in",
        "transactionHash": "0xabc123",
        "voterId": 2,
        "pollingStationId": "station_1",
    })
    assert created.status_code == 201
    assert created.json()["verified"] is False

    verified = client.put(f"/api/blockchain-transactions/{created.json()['id']}/verify")
    assert verified.json()["verified"] is True
    assert client.put("/api/blockchain-transactions/99/verify").status_code == 404


def test_dashboard_websocket(client):
    with client.websocket_connect("/ws/dashboard") as websocket:
        websocket.send_text("ping")
        assert websocket.receive_json()["type"] == "pong"

        client.post("/api/voters/2/check-in")
        event = websocket.receive_json()
        assert event["type"] == "voter_check_in"
        assert event["data"]["voter"]["voterId"] == "100456"
        assert event["data"]["stationId"] == 1


def test_station_websocket(client):
    with client.websocket_connect("/ws/stations/1") as websocket:
        websocket.send_text("ping")
        assert websocket.receive_json()["type"] == "pong"

        client.post("/api/voters/3/check-in")
        event = websocket.receive_json()
        assert event["type"] == "voter_check_in"
        assert event["data"]["userId"] == 2


def test_accessibility_update_rejects_null(client):
    seeded = client.get("/api/accessibility/voter/1").json()

    response = client.put(f"/api/accessibility/{seeded['id']}", json={"visualAssistance": None})
    assert response.status_code == 400
    assert "visualAssistance cannot be null" in response.json()["message"]
    assert client.get("/api/accessibility/voter/1").json()["visualAssistance"] is True

    cleared = client.put(f"/api/accessibility/{seeded['id']}", json={"otherNeeds": None})
    assert cleared.status_code == 200
    assert cleared.json()["otherNeeds"] is None


def test_oversized_ids_are_not_found(client):
    too_big = 2 ** 64
    assert client.get(f"/api/system-status/{too_big}").status_code == 404
    assert client.get(f"/api/accessibility/voter/{too_big}").status_code == 404
    assert client.post(f"/api/voters/{too_big}/check-in").status_code == 404
    assert client.put(f"/api/queue/{too_big}/status", json={"status": "completed"}).status_code == 404


def test_oversized_body_integers_are_bad_requests(client):
    response = client.post("/api/queue", json={"number": 2 ** 64})
    assert response.status_code == 400
    assert "number" in response.json()["message"]

    resolve = {"userId": -(2 ** 63) - 1, "resolution": "Checked"}
    assert client.put("/api/anomalies/1/resolve", json=resolve).status_code == 400
    assert client.put("/api/issues/1/resolve", json={"userId": 2 ** 63}).status_code == 400


def test_each_app_has_its_own_connections(settings, client):
    other = create_app(settings)
    assert other.state.manager is not client.app.state.manager

    with client.websocket_connect("/ws/dashboard") as websocket:
        websocket.send_text("ping")
        websocket.receive_json()
        assert len(client.app.state.manager.dashboard_connections) == 1
        assert other.state.manager.dashboard_connections == set()
