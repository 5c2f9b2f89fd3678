from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from push_notifications.adapters.fake_senders import send_push_via_console
from push_notifications.adapters.senders import sender_from_env
from push_notifications.config import (
    env_float,
    load_env_file,
    load_fcm_settings,
    load_http_settings,
)


class EnvHelperTests(unittest.TestCase):
    @mock.patch.dict(os.environ, {"NUMBER": "ten"}, clear=True)
    def test_env_float_rejects_non_numbers(self) -> None:
        with self.assertRaises(RuntimeError):
            env_float("NUMBER", 1.0)

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        http = load_http_settings()
        fcm = load_fcm_settings()

        self.assertEqual(http.port, 8080)
        self.assertEqual(http.push_path, "/sendTestNotification")
        self.assertEqual(http.cors_origins, ("*",))
        self.assertIsNone(fcm.credentials_path)
        self.assertIsNone(fcm.project_id)
        self.assertEqual(fcm.base_url, "https://fcm.googleapis.com")
        self.assertEqual(fcm.timeout_seconds, 10.0)

    @mock.patch.dict(
        os.environ,
        {
            "HTTP_PUSH_PATH": "push",
            "CORS_ORIGINS": "http://a.example, http://b.example",
            "FCM_API_BASE_URL": "http://localhost:9999/",
        },
        clear=True,
    )
    def test_overrides(self) -> None:
        http = load_http_settings()

        self.assertEqual(http.push_path, "/push")
        self.assertEqual(http.cors_origins, ("http://a.example", "http://b.example"))
        self.assertEqual(load_fcm_settings().base_url, "http://localhost:9999")

    @mock.patch.dict(os.environ, {"EXISTING": "kept"}, clear=True)
    def test_load_env_file_does_not_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            env_path = Path(tmp_dir) / ".env"
            env_path.write_text(
                "# comment\nEXISTING=replaced\nPUSH_SENDER='console'\nBROKEN_LINE\n",
                encoding="utf-8",
            )
            load_env_file(env_path)

            self.assertEqual(os.environ["EXISTING"], "kept")
            self.assertEqual(os.environ["PUSH_SENDER"], "console")
            self.assertNotIn("BROKEN_LINE", os.environ)


class SenderSelectionTests(unittest.TestCase):
    @mock.patch.dict(os.environ, {"PUSH_SENDER": "console"}, clear=True)
    def test_console_sender(self) -> None:
        send_push = sender_from_env()

        self.assertIs(send_push, send_push_via_console)
        with self.assertLogs("push_notifications.adapters.fake_senders", level="INFO"):
            self.assertTrue(send_push({"topic": "news"}).startswith("console/"))

    @mock.patch.dict(os.environ, {"PUSH_SENDER": "carrier-pigeon"}, clear=True)
    def test_unknown_sender_is_rejected(self) -> None:
        with self.assertRaises(RuntimeError):
            sender_from_env()

    @mock.patch.dict(os.environ, {}, clear=True)
    @mock.patch("push_notifications.adapters.senders.build_fcm_sender_from_env")
    def test_defaults_to_fcm(self, build_mock: mock.Mock) -> None:
        self.assertIs(sender_from_env(), build_mock.return_value)


if __name__ == "__main__":
    unittest.main()
