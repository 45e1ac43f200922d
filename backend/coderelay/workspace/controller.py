# coderelay/workspace/controller.py
from __future__ import annotations

from typing import Any, Dict, Optional

from coderelay.core.errors import RelayError
from coderelay.workspace.relay_client import RelayClient
from coderelay.workspace.session import EditorSession

RUNNING = "Running..."
NO_RESULT = "No output generated or no valid response from API."
CHAT_ERROR_PREFIX = "Error connecting to server: "


def format_run_output(envelope: Dict[str, Any]) -> str:
    status = envelope.get("apiStatus")
    if status == "loading":
        return RUNNING
    if status != "success":
        return f"Error: {envelope.get('message')}"

    data = envelope.get("data") or {}
    if data.get("stdout"):
        return f"Output:\n{data['stdout']}"
    if data.get("stderr"):
        return f"Runtime Error:\n{data['stderr']}"
    if data.get("compile_output"):
        return f"Compilation Error:\n{data['compile_output']}"
    return NO_RESULT


def begin_run(session: EditorSession) -> EditorSession:
    return session.with_output(RUNNING)


def run_active(session: EditorSession, client: RelayClient, stdin: Optional[str] = "") -> EditorSession:
    editor = session.editor
    envelope = client.run_code(editor.content, editor.language, stdin)
    return session.with_output(format_run_output(envelope))


def send_chat(session: EditorSession, client: RelayClient, message: str) -> EditorSession:
    if not message.strip():
        return session

    transcript = session.transcript.add_user(message).add_placeholder()
    try:
        reply = client.chat(message)
    except RelayError as ex:
        reply = CHAT_ERROR_PREFIX + ex.message
    return session.with_transcript(transcript.resolve(reply))
