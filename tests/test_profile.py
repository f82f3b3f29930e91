def test_profile_and_key_rotation(client, auth_headers):
    resp = client.get("/profile", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "test@example.com"

    resp = client.patch("/profile", json={"display_name": "Chef"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["display_name"] == "Chef"

    resp = client.post("/profile/api-key", headers=auth_headers)
    assert resp.status_code == 200
    new_key = resp.json()["api_key"]
    assert new_key.startswith("fr_")

    assert client.get("/profile", headers=auth_headers).status_code == 401
    assert client.get("/profile", headers={"Authorization": f"Bearer {new_key}"}).status_code == 200


def test_health(client):
    assert client.get("/health").json() == {"ok": True}
