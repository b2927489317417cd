import unittest
from fastapi.testclient import TestClient
from portions.api.api_run import app


class TestShoppingListAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_aggregate(self):
        resp = self.client.post('/api/shopping-list/aggregate', json={"entries": [
            {"ingredient": {"name": "olive oil", "unit": "tbsp", "quantity": 2}, "servings": 1, "recipe_id": "A"},
            {"ingredient": {"name": "olive oil", "unit": "tbsp", "quantity": 2}, "servings": 2, "recipe_id": "B"},
            {"ingredient": {"name": "lemon", "unit": None, "quantity": 1}, "servings": 1, "recipe_id": "B"},
        ]})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 2)
        categories = [c["category"] for c in data["categories"]]
        self.assertEqual(categories, ["produce", "oils-vinegars"])
        oil = data["categories"][1]["items"][0]
        self.assertEqual(oil["total_quantity"], 6)
        self.assertEqual(oil["source_recipe_ids"], ["A", "B"])
        self.assertEqual(data["categories"][1]["category_label"], "Oils & Vinegars")

    def test_plan_with_dates(self):
        resp = self.client.post('/api/shopping-list/plan', json={
            "start_date": "2026-10-18",
            "end_date": "2026-10-24",
            "recipes": [{"id": "r1", "ingredients": [
                {"name": "spaghetti", "quantity": 200, "unit": "g"},
            ]}],
            "entries": [
                {"plan_date": "2026-10-19", "meal_type": "dinner", "recipe_id": "r1", "servings": 2},
                {"plan_date": "2026-10-30", "meal_type": "dinner", "recipe_id": "r1", "servings": 2},
            ],
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 1)
        item = data["categories"][0]["items"][0]
        self.assertEqual(data["categories"][0]["category"], "grains")
        self.assertEqual(item["total_quantity"], 400)
        self.assertEqual(item["unit"], "g")

    def test_plan_with_named_range(self):
        resp = self.client.post('/api/shopping-list/plan', json={"range": "this-week"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 0)

    def test_plan_requires_dates(self):
        resp = self.client.post('/api/shopping-list/plan', json={"start_date": "2026-10-18"})
        self.assertEqual(resp.status_code, 422)

    def test_plan_rejects_reversed_dates(self):
        resp = self.client.post('/api/shopping-list/plan', json={
            "start_date": "2026-10-24", "end_date": "2026-10-18",
        })
        self.assertEqual(resp.status_code, 422)
