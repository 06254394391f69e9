"""Tests for /users endpoints."""


class TestUpdateProfile:
    def test_update(self, client, donor_headers):
        response = client.put(
            "/users/profile",
            json={"phone": "+15550999", "lastDonationDate": "2024-02-02"},
            headers=donor_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Profile updated successfully"
        assert data["user"]["phone"] == "+15550999"
        assert data["user"]["lastDonationDate"] == "2024-02-02"

    def test_changes_visible_on_profile(self, client, donor_headers):
        client.put("/users/profile", json={"city": "Ogdenville"}, headers=donor_headers)
        profile = client.get("/auth/profile", headers=donor_headers)
        assert profile.json()["user"]["city"] == "Ogdenville"

    def test_role_is_not_updatable(self, client, donor_headers, user_repo, donor):
        response = client.put("/users/profile", json={"role": "admin"}, headers=donor_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Unknown field: role"}
        assert user_repo.rows[donor.id]["role"] == "donor"

    def test_empty_string(self, client, donor_headers):
        response = client.put("/users/profile", json={"city": ""}, headers=donor_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "city must be a non-empty string"}

    def test_empty_body(self, client, donor_headers):
        response = client.put("/users/profile", json={}, headers=donor_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "At least one updatable field is required"}

    def test_requires_authentication(self, client):
        response = client.put("/users/profile", json={"city": "X"})
        assert response.status_code == 401
