from __future__ import annotations

import unittest
from typing import Any

from push_notifications.adapters.request_handler import handle_push_request

MESSAGE_ID = "projects/test-project/messages/test-message-id"


def make_sender(sent: list[dict[str, Any]]):
    def send_push(message: dict[str, Any]) -> str:
        sent.append(message)
        return MESSAGE_ID

    return send_push


class RequestHandlerTests(unittest.TestCase):
    def test_successful_send_returns_200(self) -> None:
        sent: list[dict[str, Any]] = []

        response = handle_push_request(
            "POST",
            {
                "token": "test_device_token",
                "notification": {"title": "Test Title", "body": "Test Body"},
            },
            send_push=make_sender(sent),
        )

        self.assertEqual(response["status_code"], 200)
        self.assertEqual(
            response["body"],
            {"success": True, "message": "Successfully sent message", "messageId": MESSAGE_ID},
        )
        self.assertEqual(
            sent,
            [
                {
                    "token": "test_device_token",
                    "notification": {"title": "Test Title", "body": "Test Body"},
                }
            ],
        )

    def test_validation_failure_returns_400(self) -> None:
        sent: list[dict[str, Any]] = []

        response = handle_push_request("POST", {"data": {"k": "v"}}, send_push=make_sender(sent))

        self.assertEqual(response["status_code"], 400)
        self.assertEqual(
            response["body"],
            {
                "success": False,
                "message": "Validation failed",
                "error": 'Exactly one target is required: provide a non-empty "token", '
                '"topic", or "condition" field.',
            },
        )
        self.assertEqual(sent, [])

    def test_send_failure_returns_500(self) -> None:
        def send_push(message: dict[str, Any]) -> str:
            raise RuntimeError("FCM send error")

        with self.assertLogs("push_notifications.application.process", level="ERROR"):
            response = handle_push_request("POST", {"token": "T"}, send_push=send_push)

        self.assertEqual(response["status_code"], 500)
        self.assertEqual(
            response["body"],
            {"success": False, "message": "Failed to send notification", "error": "FCM send error"},
        )

    def test_non_post_methods_return_405(self) -> None:
        sent: list[dict[str, Any]] = []
        for method in ("GET", "PUT", "DELETE", "PATCH"):
            with self.subTest(method=method):
                response = handle_push_request(method, {"token": "T"}, send_push=make_sender(sent))
                self.assertEqual(response["status_code"], 405)
                self.assertEqual(
                    response["body"],
                    {"success": False, "message": "Method not allowed. Use POST."},
                )
        self.assertEqual(sent, [])

    def test_null_and_array_sections_are_sent(self) -> None:
        cases = (
            ({"token": "T", "notification": None}, {"token": "T"}),
            ({"token": "T", "extraOptions": None}, {"token": "T"}),
            ({"token": "T", "notification": []}, {"token": "T", "notification": {}}),
            ({"token": "T", "extraOptions": []}, {"token": "T"}),
        )
        for body, expected in cases:
            with self.subTest(body=body):
                sent: list[dict[str, Any]] = []
                response = handle_push_request("POST", body, send_push=make_sender(sent))
                self.assertEqual(response["status_code"], 200)
                self.assertEqual(sent, [expected])

    def test_method_match_is_case_insensitive(self) -> None:
        sent: list[dict[str, Any]] = []

        response = handle_push_request("post", {"topic": "news"}, send_push=make_sender(sent))

        self.assertEqual(response["status_code"], 200)


if __name__ == "__main__":
    unittest.main()
