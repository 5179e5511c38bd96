import unittest

from fastapi.testclient import TestClient

from server.app import app


class RecordStoreApiTest(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        self.client.delete("/api/requests")
        self.client.delete("/api/riders")

    def create(self, resource="requests", name="Bob", origin=3, destination=9):
        return self.client.post(
            f"/api/{resource}",
            json={"name": name, "currentFloor": origin, "dropOffFloor": destination},
        )

    def test_create_request(self):
        response = self.create()
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["id"].startswith("req_"))
        self.assertIn("createdAt", body)
        self.assertEqual(body["name"], "Bob")
        self.assertEqual(body["currentFloor"], 3)
        self.assertEqual(body["dropOffFloor"], 9)

    def test_create_rejects_invalid_data(self):
        self.assertEqual(self.client.post("/api/requests", json={"name": "Bob"}).status_code, 400)
        self.assertEqual(self.create(name="").status_code, 400)
        self.assertEqual(self.create(origin="3").status_code, 400)
        self.assertEqual(self.client.get("/api/requests").json(), [])

    def test_list_keeps_insertion_order(self):
        self.create(name="Bob")
        self.create(name="Sue", origin=6, destination=2)
        names = [record["name"] for record in self.client.get("/api/requests").json()]
        self.assertEqual(names, ["Bob", "Sue"])

    def test_get_update_delete(self):
        record_id = self.create().json()["id"]
        self.assertEqual(self.client.get(f"/api/requests/{record_id}").json()["name"], "Bob")

        updated = self.client.put(f"/api/requests/{record_id}", json={"dropOffFloor": 10})
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["dropOffFloor"], 10)
        self.assertEqual(updated.json()["name"], "Bob")

        deleted = self.client.delete(f"/api/requests/{record_id}")
        self.assertEqual(deleted.json()["id"], record_id)
        self.assertEqual(self.client.get(f"/api/requests/{record_id}").status_code, 404)

    def test_unknown_ids_are_not_found(self):
        self.assertEqual(self.client.get("/api/riders/rider_999").status_code, 404)
        self.assertEqual(self.client.put("/api/riders/rider_999", json={"name": "X"}).status_code, 404)
        self.assertEqual(self.client.delete("/api/riders/rider_999").status_code, 404)

    def test_clear_reports_count(self):
        self.create(resource="riders")
        self.create(resource="riders", name="Sue")
        body = self.client.delete("/api/riders").json()
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["message"], "Deleted 2 riders")

    def test_health(self):
        self.create()
        self.create(resource="riders")
        self.create(resource="riders", name="Sue")
        self.assertEqual(
            self.client.get("/health").json(),
            {"status": "ok", "requests": 1, "riders": 2},
        )


if __name__ == "__main__":
    unittest.main()
