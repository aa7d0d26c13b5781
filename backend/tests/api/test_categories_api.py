class TestCategoriesApi:
    """Tests for /api/categories."""

    def test_create_with_defaults(self, user):
        category = user.category("Groceries")

        assert category["name"] == "Groceries"
        assert category["kind"] == "expense"
        assert category["color"] == "#6366f1"
        assert category["icon"] == "DollarSign"

    def test_create_trims_name_and_lowercases_color(self, user):
        category = user.category("  Rent ", color="#EF4444", icon="Home")

        assert category["name"] == "Rent"
        assert category["color"] == "#ef4444"

    def test_create_validation(self, user):
        assert user.post("/api/categories/", {"name": "   ", "kind": "expense"}).status_code == 422
        assert user.post("/api/categories/", {"name": "X", "kind": "transfer"}).status_code == 422
        assert user.post("/api/categories/", {"name": "X", "kind": "income", "color": "red"}).status_code == 422

    def test_list_sorted_by_name_and_filtered(self, user):
        user.category("Transport")
        user.category("Salary", "income")
        user.category("Food")

        names = [c["name"] for c in user.get("/api/categories/").json()]
        income = [c["name"] for c in user.get("/api/categories/", params={"kind": "income"}).json()]

        assert names == ["Food", "Salary", "Transport"]
        assert income == ["Salary"]

    def test_users_are_isolated(self, user, other_user):
        category = user.category("Private")

        assert other_user.get("/api/categories/").json() == []
        response = other_user.get(f"/api/categories/{category['id']}")
        assert response.status_code == 403
        assert response.json()["detail"] == "You do not have permission to perform this action"

    def test_get_missing(self, user):
        response = user.get("/api/categories/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Category not found"

    def test_delete_requires_confirmation(self, user):
        category = user.category("Food")
        user.transaction(category, "12.50", "2024-01-05")
        user.budget(category, "100", "2024-01")

        preview = user.get(f"/api/categories/{category['id']}/delete-preview").json()
        response = user.delete(f"/api/categories/{category['id']}")

        assert preview["transaction_count"] == 1
        assert preview["budget_count"] == 1
        assert response.status_code == 409
        assert response.json()["detail"] == preview["message"]
        assert len(user.get("/api/categories/").json()) == 1

    def test_delete_cascades_to_transactions_and_budgets(self, user):
        food = user.category("Food")
        rent = user.category("Rent")
        user.transaction(food, "50", "2024-01-05")
        user.transaction(food, "30", "2024-01-05")
        kept = user.transaction(rent, "900", "2024-01-01")
        user.budget(food, "100", "2024-01")

        response = user.delete(f"/api/categories/{food['id']}", params={"confirm": "true"})

        assert response.status_code == 204
        transactions = user.get("/api/transactions/").json()
        assert [t["id"] for t in transactions] == [kept["id"]]
        assert all(t["category_id"] != food["id"] for t in transactions)
        assert user.get("/api/budgets/").json() == []

    def test_cannot_delete_other_users_category(self, user, other_user):
        category = user.category("Food")

        response = other_user.delete(f"/api/categories/{category['id']}", params={"confirm": "true"})

        assert response.status_code == 403
        assert len(user.get("/api/categories/").json()) == 1
