import unittest

from cryptography.fernet import Fernet
from sqlalchemy import text

from lifedash.utils.encryption import EncryptedJSON
from lifedash.utils.sync_gateway import GatewayError
from tests.support import make_sql_gateway


class SqlDocumentGatewayTest(unittest.TestCase):
    def setUp(self):
        self.gateway = make_sql_gateway()
        self.snapshots = []

    def test_add_returns_fresh_ids(self):
        first = self.gateway.add_record("goals", {"name": "A", "order": 0})
        second = self.gateway.add_record("goals", {"name": "B", "order": 1})
        self.assertNotEqual(first, second)

    def test_snapshot_includes_id_and_orders_by_field(self):
        self.gateway.add_record("goals", {"name": "late", "order": 5})
        gid = self.gateway.add_record("goals", {"name": "early", "order": 1})
        docs = self.gateway.snapshot("goals", "order")
        self.assertEqual([d["name"] for d in docs], ["early", "late"])
        self.assertEqual(docs[0]["id"], gid)

    def test_descending_order(self):
        self.gateway.add_record("moodEntries", {"createdAt": "2024-01-01T00:00:00Z"})
        self.gateway.add_record("moodEntries", {"createdAt": "2024-03-01T00:00:00Z"})
        docs = self.gateway.snapshot("moodEntries", "createdAt", descending=True)
        self.assertEqual(docs[0]["createdAt"], "2024-03-01T00:00:00Z")

    def test_collections_are_separate(self):
        self.gateway.add_record("goals", {"name": "A", "order": 0})
        self.assertEqual(self.gateway.snapshot("projects", "order"), [])

    def test_update_merges_top_level_fields(self):
        gid = self.gateway.add_record("goals", {"name": "A", "order": 0, "notes": []})
        self.gateway.update_record("goals", gid, {"name": "B"})
        doc = self.gateway.snapshot("goals", "order")[0]
        self.assertEqual(doc["name"], "B")
        self.assertEqual(doc["notes"], [])

    def test_update_missing_document_raises(self):
        with self.assertRaises(GatewayError):
            self.gateway.update_record("goals", "missing", {"name": "B"})

    def test_delete_removes_document(self):
        gid = self.gateway.add_record("goals", {"name": "A", "order": 0})
        self.gateway.delete_record("goals", gid)
        self.assertEqual(self.gateway.snapshot("goals", "order"), [])

    def test_subscribers_get_snapshot_after_each_write(self):
        unsubscribe = self.gateway.subscribe("goals", "order", self.snapshots.append)
        gid = self.gateway.add_record("goals", {"name": "A", "order": 0})
        self.gateway.update_record("goals", gid, {"name": "B"})
        self.gateway.delete_record("goals", gid)
        self.assertEqual(len(self.snapshots), 4)
        self.assertEqual(self.snapshots[2][0]["name"], "B")
        self.assertEqual(self.snapshots[3], [])

        unsubscribe()
        self.gateway.add_record("goals", {"name": "C", "order": 1})
        self.assertEqual(len(self.snapshots), 4)

    def test_failing_listener_does_not_break_writes(self):
        def broken(docs):
            if docs:
                raise RuntimeError("boom")

        self.gateway.subscribe("goals", "order", broken)
        with self.assertLogs("lifedash.utils.sql_gateway", level="ERROR"):
            self.gateway.add_record("goals", {"name": "A", "order": 0})
        self.assertEqual(len(self.gateway.snapshot("goals", "order")), 1)


class EncryptedPayloadTest(unittest.TestCase):
    def setUp(self):
        EncryptedJSON.configure(Fernet.generate_key().decode())
        self.gateway = make_sql_gateway()

    def tearDown(self):
        EncryptedJSON.configure(None)

    def test_payload_is_encrypted_at_rest(self):
        self.gateway.add_record("moodEntries", {"notes": [{"text": "private thought"}]})

        engine = self.gateway.session_factory.kw["bind"]
        with engine.connect() as conn:
            raw = conn.execute(text("SELECT payload FROM documents")).scalar_one()
        self.assertNotIn("private thought", raw)

        doc = self.gateway.snapshot("moodEntries", "createdAt")[0]
        self.assertEqual(doc["notes"][0]["text"], "private thought")


if __name__ == "__main__":
    unittest.main()
