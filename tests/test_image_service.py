import unittest

from lifedash.services.goal_service import GoalService
from lifedash.services.image_service import attach_image, blob_path, is_image
from tests.support import FlakyGateway, MemoryBlobStore, make_sql_gateway

PNG = b"\x89PNG\r\n\x1a\nfake"


class ImageHelpersTest(unittest.TestCase):
    def test_is_image(self):
        self.assertTrue(is_image("image/png"))
        self.assertFalse(is_image("application/pdf"))
        self.assertFalse(is_image(None))

    def test_blob_path_is_unique_per_upload(self):
        first = blob_path("goals", "g1", "Photo.PNG", "image/png")
        second = blob_path("goals", "g1", "Photo.PNG", "image/png")
        self.assertTrue(first.startswith("goals/g1/"))
        self.assertTrue(first.endswith(".png"))
        self.assertNotEqual(first, second)

    def test_blob_path_extension_from_content_type(self):
        self.assertTrue(blob_path("projects", "p1", None, "image/png").endswith(".png"))


class AttachImageTest(unittest.TestCase):
    def setUp(self):
        self.gateway = FlakyGateway(make_sql_gateway())
        self.blobs = MemoryBlobStore()
        self.service = GoalService(self.gateway, self.blobs)
        self.service.start()
        self.goal = self.service.add_goal()

    def tearDown(self):
        self.service.stop()

    def test_upload_then_attach(self):
        goal = attach_image(self.service, self.goal.id, "cover.png", PNG, "image/png")
        self.assertIn(goal.image_ref, self.blobs.objects)
        self.assertEqual(self.blobs.objects[goal.image_ref], (PNG, "image/png"))

    def test_replacing_image_deletes_old_blob(self):
        first = attach_image(self.service, self.goal.id, "a.png", PNG, "image/png").image_ref
        second = attach_image(self.service, self.goal.id, "b.png", PNG, "image/png").image_ref
        self.assertNotIn(first, self.blobs.objects)
        self.assertIn(second, self.blobs.objects)

    def test_non_image_and_empty_rejected(self):
        self.assertIsNone(attach_image(self.service, self.goal.id, "a.pdf", b"%PDF", "application/pdf"))
        self.assertIsNone(attach_image(self.service, self.goal.id, "a.png", b"", "image/png"))
        self.assertEqual(self.blobs.objects, {})

    def test_failed_upload_leaves_record_alone(self):
        self.blobs.fail_put = True
        with self.assertLogs("lifedash.services.image_service", level="ERROR"):
            self.assertIsNone(attach_image(self.service, self.goal.id, "a.png", PNG, "image/png"))
        self.assertIsNone(self.service.get(self.goal.id).image_ref)

    def test_failed_attach_keeps_uploaded_blob(self):
        self.gateway.failing = True
        with self.assertLogs("lifedash.services.image_service", level="WARNING"):
            self.assertIsNone(attach_image(self.service, self.goal.id, "a.png", PNG, "image/png"))
        self.assertEqual(len(self.blobs.objects), 1)
        self.assertIsNone(self.service.get(self.goal.id).image_ref)

    def test_remove_image(self):
        path = attach_image(self.service, self.goal.id, "a.png", PNG, "image/png").image_ref
        goal = self.service.remove_image(self.goal.id)
        self.assertIsNone(goal.image_ref)
        self.assertNotIn(path, self.blobs.objects)
        self.assertIsNone(self.service.remove_image(self.goal.id))

    def test_delete_goal_removes_blob(self):
        attach_image(self.service, self.goal.id, "a.png", PNG, "image/png")
        self.service.delete(self.goal.id)
        self.assertEqual(self.blobs.objects, {})


if __name__ == "__main__":
    unittest.main()
