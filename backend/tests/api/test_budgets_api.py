from decimal import Decimal


class TestBudgetsApi:
    """Tests for /api/budgets."""

    def test_budget_under_limit(self, user):
        food = user.category("Food")
        salary = user.category("Salary", "income")
        user.transaction(food, "50", "2024-01-05")
        user.transaction(salary, "200", "2024-01-10")
        user.transaction(food, "30", "2024-01-05")

        budget = user.budget(food, "100", "2024-01")

        assert budget["month"] == "2024-01-01"
        assert Decimal(budget["spent"]) == Decimal("80")
        assert budget["percentage"] == 80.0
        assert budget["is_over_budget"] is False
        assert Decimal(budget["overage"]) == 0
        assert budget["category"]["name"] == "Food"

    def test_budget_over_limit(self, user):
        food = user.category("Food")
        user.transaction(food, "50", "2024-01-05")
        user.transaction(food, "30", "2024-01-05")

        budget = user.budget(food, "50", "2024-01-01")

        assert budget["is_over_budget"] is True
        assert Decimal(budget["overage"]) == Decimal("30")
        assert budget["percentage"] == 160.0
        assert budget["display_percentage"] == 100.0

    def test_duplicate_budget_is_rejected(self, user):
        food = user.category("Food")
        user.budget(food, "100", "2024-01")

        response = user.post("/api/budgets/", {"category_id": food["id"], "amount": "80", "month": "2024-01-15"})

        assert response.status_code == 409
        assert response.json()["detail"] == "A budget for this category and month already exists"
        assert len(user.get("/api/budgets/").json()) == 1

    def test_same_category_and_month_for_different_users(self, user, other_user):
        user.budget(user.category("Food"), "100", "2024-01")

        other_user.budget(other_user.category("Food"), "100", "2024-01")

    def test_income_category_is_rejected(self, user):
        salary = user.category("Salary", "income")

        response = user.post("/api/budgets/", {"category_id": salary["id"], "amount": "80", "month": "2024-01"})

        assert response.status_code == 422
        assert response.json()["field"] == "category_id"

    def test_amount_must_be_positive(self, user):
        food = user.category("Food")

        response = user.post("/api/budgets/", {"category_id": food["id"], "amount": "0", "month": "2024-01"})

        assert response.status_code == 422

    def test_list_latest_month_first(self, user):
        food = user.category("Food")
        rent = user.category("Rent")
        user.budget(food, "100", "2024-01")
        user.budget(food, "100", "2024-03")
        user.budget(rent, "900", "2024-02")

        months = [b["month"] for b in user.get("/api/budgets/").json()]

        assert months == ["2024-03-01", "2024-02-01", "2024-01-01"]

    def test_delete_budget(self, user, other_user):
        budget = user.budget(user.category("Food"), "100", "2024-01")
        url = f"/api/budgets/{budget['id']}"

        assert other_user.delete(url, params={"confirm": "true"}).status_code == 403
        assert user.delete(url).status_code == 409
        assert user.delete(url, params={"confirm": "true"}).status_code == 204
        assert user.get(url).status_code == 404
