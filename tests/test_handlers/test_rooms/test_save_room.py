import base64
import importlib
import json
import unittest
from unittest.mock import MagicMock, patch

from dost_admin.common.models.results import ErrorKind, Result
from dost_admin.common.models.rooms import Room, RoomType
from dost_admin.common.utils.config import SupabaseSettings

CONFIGURED = SupabaseSettings(url="https://demo.supabase.co", anon_key="anon-key")


def room_body(**overrides):
    body = {
        "roomname": "Garden View",
        "roomtype": "Double",
        "price": 2500,
        "capacity": 2,
        "status": "Available",
        "amenities": ["WiFi"],
    }
    body.update(overrides)
    return body


def encoded_file(name="front.jpg"):
    return {
        "filename": name,
        "content_base64": base64.b64encode(b"jpeg").decode(),
        "content_type": "image/jpeg",
    }


class SaveRoomTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        import dost_admin.handlers.rooms.save_room as mod
        cls.mod = importlib.reload(mod)

    def setUp(self):
        self.room = Room(id="r9", roomname="Garden View", roomtype=RoomType.DOUBLE, price=2500, capacity=2)

    def _save(self, body, room_id=None):
        event = {"body": json.dumps(body) if not isinstance(body, str) else body}
        if room_id:
            event["pathParameters"] = {"room_id": room_id}
        resp = self.mod.save_room(event, None)
        return resp, json.loads(resp["body"])

    def test_create_rejected_in_demo_mode(self):
        resp, body = self._save(room_body())

        self.assertEqual(403, resp["statusCode"])
        self.assertEqual(body["data"], {"error": ErrorKind.DEMO_MODE.value})

    def test_create_success(self):
        with patch.object(self.mod.room_service, "create_room", return_value=Result(data=self.room)) as create:
            resp, body = self._save(room_body())

        self.assertEqual(200, resp["statusCode"])
        self.assertEqual(body["data"]["id"], "r9")
        self.assertEqual(create.call_args[0][0].roomname, "Garden View")

    def test_create_without_amenities(self):
        resp, _ = self._save(room_body(amenities=[]))

        self.assertEqual(400, resp["statusCode"])

    def test_update_uses_path_id(self):
        with patch.object(self.mod.room_service, "update_room", return_value=Result(data=self.room)) as update:
            resp, body = self._save({"price": 3000}, room_id="r9")

        self.assertEqual(200, resp["statusCode"])
        self.assertEqual(body["message"], "Room updated successfully")
        room_id, req = update.call_args[0]
        self.assertEqual(room_id, "r9")
        self.assertEqual(req.to_patch(), {"price": 3000.0})

    def test_update_not_found(self):
        with patch.object(
            self.mod.room_service,
            "update_room",
            return_value=Result.failure("room 'r404' not found", ErrorKind.NOT_FOUND),
        ):
            resp, _ = self._save({"price": 3000}, room_id="r404")

        self.assertEqual(404, resp["statusCode"])

    def test_uploaded_files_appended_to_images(self):
        with patch.object(self.mod.room_service, "create_room", return_value=Result(data=self.room)) as create:
            self._save(room_body(images=["https://existing"], files=[encoded_file()]))

        req = create.call_args[0][0]
        self.assertEqual(req.images, ["https://existing", "https://via.placeholder.com/400"])

    def test_too_many_images(self):
        resp, _ = self._save(
            room_body(images=["https://a"] * 4, files=[encoded_file("1.jpg"), encoded_file("2.jpg")])
        )

        self.assertEqual(400, resp["statusCode"])

    def test_bad_file_payload(self):
        resp, _ = self._save(room_body(files=[{"filename": "x.jpg", "content_base64": "***"}]))

        self.assertEqual(400, resp["statusCode"])

    def test_missing_body(self):
        resp = self.mod.save_room({}, None)

        self.assertEqual(400, resp["statusCode"])

    def test_invalid_json(self):
        resp, _ = self._save("{not json")

        self.assertEqual(400, resp["statusCode"])

    def test_non_object_body(self):
        resp, _ = self._save("[1, 2]")

        self.assertEqual(400, resp["statusCode"])


class SaveRoomUploadTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        import dost_admin.handlers.rooms.save_room as mod
        cls.mod = importlib.reload(mod)

    def setUp(self):
        self.room_repo = MagicMock()
        self.image_repo = MagicMock()
        self.image_repo.upload_image.return_value = "https://bucket/new.jpg"
        self.patches = [
            patch.object(self.mod.room_service, "settings", CONFIGURED),
            patch.object(self.mod.room_service, "room_repo", self.room_repo),
            patch.object(self.mod.room_service, "image_repo", self.image_repo),
        ]
        for p in self.patches:
            p.start()

    def tearDown(self):
        for p in self.patches:
            p.stop()

    def _save(self, body, room_id=None):
        event = {"body": json.dumps(body)}
        if room_id:
            event["pathParameters"] = {"room_id": room_id}
        return self.mod.save_room(event, None)

    def _stored_room(self, images):
        return Room(
            id="r1", roomname="Superior Room 101", roomtype=RoomType.SINGLE,
            price=1500, capacity=1, images=images,
        )

    def test_invalid_create_uploads_nothing(self):
        resp = self._save({"roomname": "X", "files": [encoded_file()]})

        self.assertEqual(400, resp["statusCode"])
        self.image_repo.upload_image.assert_not_called()
        self.room_repo.add_room.assert_not_called()

    def test_invalid_update_uploads_nothing(self):
        resp = self._save({"price": -1, "files": [encoded_file()]}, room_id="r1")

        self.assertEqual(400, resp["statusCode"])
        self.image_repo.upload_image.assert_not_called()

    def test_create_uploads_and_persists_urls(self):
        self.room_repo.add_room.return_value = self._stored_room(["https://bucket/new.jpg"])

        resp = self._save(room_body(files=[encoded_file()]))

        self.assertEqual(200, resp["statusCode"])
        self.image_repo.upload_image.assert_called_once()
        self.assertEqual(self.room_repo.add_room.call_args[0][0]["images"], ["https://bucket/new.jpg"])

    def test_update_with_files_only_keeps_stored_images(self):
        self.room_repo.get_room.return_value = self._stored_room(["https://old/1.jpg"])
        self.room_repo.update_room.return_value = self._stored_room(
            ["https://old/1.jpg", "https://bucket/new.jpg"]
        )

        resp = self._save({"files": [encoded_file()]}, room_id="r1")

        self.assertEqual(200, resp["statusCode"])
        self.room_repo.get_room.assert_called_once_with("r1")
        self.room_repo.update_room.assert_called_once_with(
            "r1", {"images": ["https://old/1.jpg", "https://bucket/new.jpg"]}
        )

    def test_update_with_images_in_body_does_not_load_room(self):
        self.room_repo.update_room.return_value = self._stored_room([])

        self._save({"images": ["https://kept.jpg"], "files": [encoded_file()]}, room_id="r1")

        self.room_repo.get_room.assert_not_called()
        self.room_repo.update_room.assert_called_once_with(
            "r1", {"images": ["https://kept.jpg", "https://bucket/new.jpg"]}
        )

    def test_update_counts_stored_images_against_limit(self):
        self.room_repo.get_room.return_value = self._stored_room([f"https://old/{i}.jpg" for i in range(5)])

        resp = self._save({"files": [encoded_file()]}, room_id="r1")

        self.assertEqual(400, resp["statusCode"])
        self.image_repo.upload_image.assert_not_called()
        self.room_repo.update_room.assert_not_called()

    def test_update_unknown_room_with_files(self):
        self.room_repo.get_room.return_value = None

        resp = self._save({"files": [encoded_file()]}, room_id="missing")

        self.assertEqual(404, resp["statusCode"])
        self.image_repo.upload_image.assert_not_called()


if __name__ == "__main__":
    unittest.main()
