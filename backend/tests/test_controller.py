# tests/test_controller.py
from __future__ import annotations

import unittest
from unittest import mock

import requests

from coderelay.core.errors import TransportError, UpstreamError
from coderelay.workspace.controller import (
    NO_RESULT,
    RUNNING,
    begin_run,
    format_run_output,
    run_active,
    send_chat,
)
from coderelay.workspace.relay_client import RelayClient
from coderelay.workspace.session import EditorSession
from coderelay.workspace.transcript import PLACEHOLDER_TEXT

from helpers import fake_response

POST = "coderelay.workspace.relay_client.http_requests.post"


class TestFormatRunOutput(unittest.TestCase):
    def test_success_variants(self):
        self.assertEqual(format_run_output({"apiStatus": "success", "data": {"stdout": "1\n"}}), "Output:\n1\n")
        self.assertEqual(
            format_run_output({"apiStatus": "success", "data": {"stdout": None, "stderr": "trace"}}),
            "Runtime Error:\ntrace",
        )
        self.assertEqual(
            format_run_output({"apiStatus": "success", "data": {"compile_output": "bad"}}),
            "Compilation Error:\nbad",
        )
        self.assertEqual(format_run_output({"apiStatus": "success", "data": {}}), NO_RESULT)

    def test_error_and_loading(self):
        self.assertEqual(format_run_output({"apiStatus": "error", "message": "Execution failed."}), "Error: Execution failed.")
        self.assertEqual(format_run_output({"apiStatus": "loading"}), RUNNING)


class TestRelayClient(unittest.TestCase):
    def setUp(self):
        self.client = RelayClient("http://relay.test/")

    def test_run_code_posts_editor_payload(self):
        envelope = {"apiStatus": "success", "data": {"stdout": "ok"}}
        with mock.patch(POST, return_value=fake_response(envelope)) as post:
            self.assertEqual(self.client.run_code("code", "python"), envelope)
        self.assertEqual(post.call_args.args[0], "http://relay.test/run-code")
        self.assertEqual(post.call_args.kwargs["json"], {"code": "code", "language": "python", "stdin": ""})

    def test_run_code_transport_failure_is_error_envelope(self):
        with mock.patch(POST, side_effect=requests.ConnectionError("refused")):
            body = self.client.run_code("code", "python")
        self.assertEqual(body["apiStatus"], "error")
        self.assertIn("refused", body["message"])

    def test_chat_reads_error_body_of_500(self):
        with mock.patch(POST, return_value=fake_response({"success": False, "error": "no key"}, status_code=500)):
            with self.assertRaises(UpstreamError) as ctx:
                self.client.chat("hi")
        self.assertEqual(ctx.exception.message, "no key")

    def test_chat_transport_failure(self):
        with mock.patch(POST, side_effect=requests.ConnectionError("refused")):
            with self.assertRaises(TransportError):
                self.client.chat("hi")


class TestController(unittest.TestCase):
    def setUp(self):
        self.client = mock.create_autospec(RelayClient, instance=True)
        self.session = EditorSession().upload_file("main.py", "print(2)")

    def test_run_active_sends_editor_state(self):
        self.client.run_code.return_value = {"apiStatus": "success", "data": {"stdout": "2\n"}}
        session = run_active(begin_run(self.session), self.client)
        self.client.run_code.assert_called_once_with("print(2)", "python", "")
        self.assertEqual(session.output, "Output:\n2\n")

    def test_begin_run_marks_output(self):
        self.assertEqual(begin_run(self.session).output, "Running...")

    def test_send_chat_resolves_placeholder(self):
        self.client.chat.return_value = "Looks fine."
        session = send_chat(self.session, self.client, "review my code")
        self.assertEqual([(m.role, m.content) for m in session.transcript.messages], [("user", "review my code"), ("ai", "Looks fine.")])

    def test_send_chat_failure_is_inline_message(self):
        self.client.chat.side_effect = UpstreamError("GEMINI_API_KEY not configured")
        session = send_chat(self.session, self.client, "hi")
        last = session.transcript.messages[-1]
        self.assertEqual(last.content, "Error connecting to server: GEMINI_API_KEY not configured")
        self.assertNotEqual(last.content, PLACEHOLDER_TEXT)
        self.assertFalse(session.transcript.has_pending)

    def test_blank_message_is_ignored(self):
        session = send_chat(self.session, self.client, "   ")
        self.assertIs(session, self.session)
        self.client.chat.assert_not_called()


if __name__ == "__main__":
    unittest.main()
