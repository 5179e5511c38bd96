import unittest

from fastapi.testclient import TestClient

from dispatch import ApiStore, DispatchCore, InMemoryStore, Person, RecordStoreError
from server.app import app


def make_person(name, origin, destination):
    person = Person(name, origin)
    person.request_drop_off(destination)
    return person


class InMemoryStoreTest(unittest.TestCase):
    def test_remove_is_identity_based(self):
        store = InMemoryStore()
        first = make_person("A", 1, 2)
        second = make_person("A", 1, 2)
        store.add(first)
        store.add(second)
        self.assertTrue(store.remove(second))
        self.assertEqual(store.list(), [first])
        self.assertIs(store.list()[0], first)
        self.assertFalse(store.remove(second))

    def test_clear(self):
        store = InMemoryStore()
        store.add(make_person("A", 1, 2))
        self.assertEqual(store.clear(), 1)
        self.assertEqual(len(store), 0)


class ApiStoreTest(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        self.client.delete("/api/requests")
        self.client.delete("/api/riders")
        self.requests = ApiStore("requests", client=self.client)
        self.riders = ApiStore("riders", client=self.client)

    def test_add_list_remove_keep_identity(self):
        person = make_person("Bob", 3, 9)
        self.assertEqual(self.requests.add(person), 1)
        listed = self.requests.list()
        self.assertEqual(len(listed), 1)
        self.assertIs(listed[0], person)
        self.assertTrue(self.requests.remove(person))
        self.assertEqual(self.client.get("/api/requests").json(), [])

    def test_records_from_other_clients(self):
        self.client.post("/api/requests", json={"name": "Sue", "currentFloor": 6, "dropOffFloor": 2})
        listed = self.requests.list()
        self.assertEqual(listed[0].name, "Sue")
        self.assertEqual(listed[0].drop_off_floor, 2)
        self.assertTrue(listed[0].record_id.startswith("req_"))
        self.assertTrue(self.requests.remove(listed[0]))

    def test_remove_unknown_person(self):
        self.assertFalse(self.riders.remove(make_person("Ghost", 1, 2)))

    def test_rejected_record_raises(self):
        person = make_person("Bob", 3, 9)
        person.name = " "
        with self.assertRaises(RecordStoreError) as ctx:
            self.requests.add(person)
        self.assertEqual(ctx.exception.status_code, 400)

    def test_clear_and_health(self):
        self.requests.add(make_person("A", 1, 2))
        self.requests.add(make_person("B", 2, 3))
        self.assertEqual(self.requests.health()["requests"], 2)
        self.assertEqual(self.requests.clear(), 2)
        self.assertEqual(self.requests.list(), [])

    def test_unknown_resource(self):
        with self.assertRaises(ValueError):
            ApiStore("elevators", client=self.client)

    def test_core_mirrors_state_into_record_store(self):
        core = DispatchCore(requests=self.requests, riders=self.riders)
        core.enqueue(make_person("Bob", 3, 9))
        core.enqueue(make_person("Sue", 6, 2))
        self.assertEqual(len(self.client.get("/api/requests").json()), 2)

        core.serve_all("13:00")
        self.assertEqual(core.total_distance, 16)
        self.assertEqual(core.total_stops, 4)
        self.assertEqual(core.current_floor, 2)
        self.assertEqual(self.client.get("/health").json(), {"status": "ok", "requests": 0, "riders": 0})

    def test_rider_is_mirrored_between_pickup_and_drop_off(self):
        core = DispatchCore(requests=self.requests, riders=self.riders)
        person = make_person("Bob", 3, 9)
        core.pick_up(person)
        self.assertEqual([r["name"] for r in self.client.get("/api/riders").json()], ["Bob"])
        core.drop_off(person)
        self.assertEqual(self.client.get("/api/riders").json(), [])

    def test_optimized_batch_with_remote_store(self):
        core = DispatchCore(requests=self.requests, riders=self.riders)
        core.move_to_floor(10)
        core.enqueue(make_person("A", 8, 4))
        core.enqueue(make_person("B", 6, 1))
        core.serve_all_optimized("11:00")
        self.assertEqual(core.total_distance, 10 + 9 + 1)
        self.assertEqual(core.current_floor, 0)
        self.assertEqual(core.pending(), [])
        self.assertEqual(core.aboard(), [])


if __name__ == "__main__":
    unittest.main()
