"""Fixtures for exercising the HTTP API."""

import pytest


class ApiUser:
    """A registered user driving the API through a TestClient."""

    def __init__(self, client, headers):
        self.client = client
        self.headers = headers

    def get(self, url, **kwargs):
        return self.client.get(url, headers=self.headers, **kwargs)

    def post(self, url, json):
        return self.client.post(url, json=json, headers=self.headers)

    def delete(self, url, **kwargs):
        return self.client.delete(url, headers=self.headers, **kwargs)

    def category(self, name="Food", kind="expense", **fields):
        response = self.post("/api/categories/", {"name": name, "kind": kind, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    def transaction(self, category, amount, day, description="Test"):
        response = self.post("/api/transactions/", {
            "category_id": category["id"],
            "amount": amount,
            "description": description,
            "date": day,
            "kind": category["kind"],
        })
        assert response.status_code == 201, response.text
        return response.json()

    def budget(self, category, amount, month):
        response = self.post("/api/budgets/", {
            "category_id": category["id"],
            "amount": amount,
            "month": month,
        })
        assert response.status_code == 201, response.text
        return response.json()


@pytest.fixture
def user(client, auth_headers):
    return ApiUser(client, auth_headers("user@example.com"))


@pytest.fixture
def other_user(client, auth_headers):
    return ApiUser(client, auth_headers("other@example.com"))
