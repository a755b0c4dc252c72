from conftest import load_payload, register


def test_create_percentage_load_nulls_mileage_fields(client, auth_headers):
    resp = client.post(
        "/api/loads", json=load_payload(fscPerLoadedMile=0.45, calculatedDeductions=120.0), headers=auth_headers
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["proNumber"] == "PRO-1001"
    assert body["linehaul"] == 2100.0
    assert body["fsc"] == 310.5
    assert body["fscPerLoadedMile"] is None
    assert body["totalDeductions"] == 120.0
    assert body["scaleCost"] == 0
    assert body["dateDelivered"] is None


def test_create_mileage_load_nulls_percentage_fields(client, auth_headers):
    payload = load_payload(driverPayType="mileage", fscPerLoadedMile=0.52)
    resp = client.post("/api/loads", json=payload, headers=auth_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["fscPerLoadedMile"] == 0.52
    assert body["linehaul"] is None
    assert body["fsc"] is None


def test_percentage_load_without_fsc_is_rejected(client, auth_headers):
    payload = load_payload()
    del payload["fsc"]
    resp = client.post("/api/loads", json=payload, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing or invalid required field: fsc"}


def test_mileage_load_without_rate_is_rejected(client, auth_headers):
    resp = client.post("/api/loads", json=load_payload(driverPayType="mileage"), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing or invalid required field: fscPerLoadedMile"


def test_blank_base_field_is_rejected(client, auth_headers):
    resp = client.post("/api/loads", json=load_payload(originCity=""), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing or invalid required field: originCity"


def test_zero_miles_are_accepted(client, auth_headers):
    resp = client.post("/api/loads", json=load_payload(deadheadMiles=0), headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["deadheadMiles"] == 0


def test_non_numeric_field_is_rejected(client, auth_headers):
    resp = client.post("/api/loads", json=load_payload(weight="heavy"), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing or invalid required field: weight"


def test_unknown_pay_type_is_rejected(client, auth_headers):
    resp = client.post("/api/loads", json=load_payload(driverPayType="hourly"), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid driverPayType specified."


def test_second_active_load_conflicts(client, auth_headers, active_load):
    resp = client.post("/api/loads", json=load_payload("PRO-1002", dateDelivered=None), headers=auth_headers)
    assert resp.status_code == 409
    assert "active load already exists" in resp.json()["message"]


def test_invalid_delivery_date_counts_as_active(client, auth_headers, active_load):
    resp = client.post("/api/loads", json=load_payload("PRO-1002", dateDelivered="Invalid date"), headers=auth_headers)
    assert resp.status_code == 409


def test_delivered_load_can_be_added_alongside_active(client, auth_headers, active_load):
    resp = client.post(
        "/api/loads", json=load_payload("PRO-0999", dateDelivered="2026-09-20"), headers=auth_headers
    )
    assert resp.status_code == 201
    assert resp.json()["dateDelivered"].startswith("2026-09-20")


def test_active_loads_are_per_user(client, auth_headers, active_load):
    other = register(client, email="other@example.com")
    resp = client.post("/api/loads", json=load_payload("PRO-2001"), headers=other)
    assert resp.status_code == 201


def test_duplicate_pro_number_conflicts(client, auth_headers, active_load):
    payload = load_payload(dateDelivered="2026-10-02")
    resp = client.post("/api/loads", json=payload, headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["message"] == "Load with this Pro Number already exists."


def test_list_loads_only_returns_own(client, auth_headers, active_load):
    other = register(client, email="other@example.com")
    client.post("/api/loads", json=load_payload("PRO-2001"), headers=other)

    resp = client.get("/api/loads", headers=auth_headers)
    assert resp.status_code == 200
    assert [l["proNumber"] for l in resp.json()] == ["PRO-1001"]


def test_update_partial_keeps_other_fields(client, auth_headers, active_load):
    resp = client.put("/api/loads/PRO-1001", json={"weight": 39000, "projectedNet": 1450.25}, headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["weight"] == 39000
    assert body["projectedNet"] == 1450.25
    assert body["linehaul"] == 2100.0


def test_update_switch_to_mileage_nulls_percentage_fields(client, auth_headers, active_load):
    resp = client.put(
        "/api/loads/PRO-1001", json={"driverPayType": "mileage", "fscPerLoadedMile": 0.6}, headers=auth_headers
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["driverPayType"] == "mileage"
    assert body["fscPerLoadedMile"] == 0.6
    assert body["linehaul"] is None
    assert body["fsc"] is None


def test_update_without_pay_type_uses_stored_type(client, auth_headers, active_load):
    resp = client.put("/api/loads/PRO-1001", json={"fscPerLoadedMile": 0.6, "fsc": 200}, headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["fscPerLoadedMile"] is None
    assert body["fsc"] == 200


def test_update_invalid_pay_type(client, auth_headers, active_load):
    resp = client.put("/api/loads/PRO-1001", json={"driverPayType": "weekly"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid driverPayType specified for update."


def test_update_reactivating_conflicts_with_other_active(client, auth_headers, active_load):
    client.post("/api/loads", json=load_payload("PRO-0999", dateDelivered="2026-09-20"), headers=auth_headers)
    resp = client.put("/api/loads/PRO-0999", json={"dateDelivered": None}, headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["message"] == "Another load is already active. Cannot set this load as active."


def test_update_active_load_to_active_is_allowed(client, auth_headers, active_load):
    resp = client.put("/api/loads/PRO-1001", json={"dateDelivered": ""}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["dateDelivered"] is None


def test_update_other_users_load_is_404(client, auth_headers, active_load):
    other = register(client, email="other@example.com")
    resp = client.put("/api/loads/PRO-1001", json={"weight": 1}, headers=other)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Load not found"}


def test_complete_load(client, auth_headers, active_load):
    resp = client.put("/api/loads/PRO-1001/complete", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["dateDelivered"] is not None

    again = client.put("/api/loads/PRO-1001/complete", headers=auth_headers)
    assert again.status_code == 400
    assert again.json() == {"message": "Load already completed"}

    # With the first load delivered a new active load is allowed
    resp = client.post("/api/loads", json=load_payload("PRO-1002"), headers=auth_headers)
    assert resp.status_code == 201


def test_complete_missing_load_is_404(client, auth_headers):
    resp = client.put("/api/loads/NOPE/complete", headers=auth_headers)
    assert resp.status_code == 404


def test_epoch_millisecond_delivery_date_is_delivered(client, auth_headers, active_load):
    resp = client.post("/api/loads", json=load_payload("PRO-0998", dateDelivered=1790000000000), headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["dateDelivered"].startswith("2026-09-21")
