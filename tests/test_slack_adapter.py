import threading
import unittest
from typing import Any, Dict, List


class FakeWebClient:
    def __init__(self, users=None, channels=None):
        self.users = dict(users or {})
        self.channels = dict(channels or {})
        self.calls: List[tuple] = []

    def users_info(self, user: str) -> Dict[str, Any]:
        from slack_sdk.errors import SlackApiError

        self.calls.append(("users_info", user))
        if user not in self.users:
            raise SlackApiError("user_not_found", {"ok": False, "error": "user_not_found"})
        return {"ok": True, "user": self.users[user]}

    def conversations_info(self, channel: str) -> Dict[str, Any]:
        from slack_sdk.errors import SlackApiError

        self.calls.append(("conversations_info", channel))
        if channel not in self.channels:
            raise SlackApiError("channel_not_found", {"ok": False, "error": "channel_not_found"})
        return {"ok": True, "channel": self.channels[channel]}


class FakeRtm:
    def __init__(self, token: str, web_client: Any, fail: bool = False):
        self.token = token
        self.web_client = web_client
        self.fail = fail
        self.handlers: Dict[str, List[Any]] = {}
        self.connected = 0
        self.closed = 0

    def on(self, event: str):
        def register(fn):
            self.handlers.setdefault(event, []).append(fn)
            return fn

        return register

    def connect(self) -> None:
        self.connected += 1
        if self.fail:
            raise RuntimeError("invalid_auth")

    def close(self) -> None:
        self.closed += 1

    def deliver(self, event: str, payload: Dict[str, Any]) -> None:
        for fn in self.handlers.get(event, []):
            fn(self, payload)


class TestSlackDirectory(unittest.TestCase):
    def test_user_lookup_is_cached(self) -> None:
        from slackchat.ports.chat.adapters.slack import SlackDirectory

        web = FakeWebClient(users={"U1": {"id": "U1", "name": "jdoe", "profile": {"real_name": "Jane Doe"}}})
        d = SlackDirectory(web)

        self.assertEqual(d.lookup_user("U1"), {"id": "U1", "name": "jdoe", "real_name": "Jane Doe"})
        d.lookup_user("U1")
        self.assertEqual(web.calls, [("users_info", "U1")])

        d.forget_user("U1")
        d.lookup_user("U1")
        self.assertEqual(len(web.calls), 2)

    def test_unknown_entities(self) -> None:
        from slackchat.ports.chat.adapters.slack import SlackDirectory

        web = FakeWebClient(channels={"C2": {"id": "C2"}})
        d = SlackDirectory(web)

        self.assertIsNone(d.lookup_user("U404"))
        self.assertIsNone(d.lookup_user(""))
        self.assertIsNone(d.lookup_channel("C404"))
        self.assertIsNone(d.lookup_channel("C2"))

    def test_channel_lookup(self) -> None:
        from slackchat.ports.chat.adapters.slack import SlackDirectory

        web = FakeWebClient(channels={"C1": {"id": "C1", "name": "general"}})
        d = SlackDirectory(web)

        self.assertEqual(d.lookup_channel("C1"), {"id": "C1", "name": "general"})
        self.assertEqual(d.lookup_channel("C1")["name"], "general")
        self.assertEqual(web.calls, [("conversations_info", "C1")])


def _connection(fail: bool = False):
    from slackchat.ports.chat.adapters.slack import SlackRtmConnection

    built: List[FakeRtm] = []

    def factory(token, web_client):
        rtm = FakeRtm(token, web_client, fail=fail)
        built.append(rtm)
        return rtm

    web = FakeWebClient(users={"U1": {"id": "U1", "name": "jdoe", "real_name": "Jane"}})
    return SlackRtmConnection("xoxb-bot", web_client=web, rtm_factory=factory), built, web


def _start_and_wait(conn) -> Dict[str, Any]:
    done = threading.Event()
    seen: Dict[str, Any] = {}

    def opened() -> None:
        seen["signal"] = "opened"
        done.set()

    def failed(err) -> None:
        seen["signal"] = "unable_to_start"
        seen["error"] = err
        done.set()

    conn.once("opened", opened)
    conn.once("unable_to_start", failed)
    conn.start()
    assert done.wait(5)
    return seen


class TestSlackRtmConnection(unittest.TestCase):
    def test_open_and_forward_messages(self) -> None:
        conn, built, _ = _connection()
        seen = _start_and_wait(conn)

        self.assertEqual(seen["signal"], "opened")
        rtm = built[0]
        self.assertEqual(rtm.token, "xoxb-bot")
        self.assertEqual(rtm.connected, 1)

        got = []
        conn.on("message", got.append)
        rtm.deliver("message", {"type": "message", "channel": "C1", "text": "hi"})
        self.assertEqual(got, [{"type": "message", "channel": "C1", "text": "hi"}])

        conn.disconnect()
        conn.disconnect()
        self.assertEqual(rtm.closed, 1)

    def test_failed_handshake(self) -> None:
        conn, built, _ = _connection(fail=True)
        seen = _start_and_wait(conn)

        self.assertEqual(seen["signal"], "unable_to_start")
        self.assertIn("invalid_auth", str(seen["error"]))
        self.assertEqual(built[0].closed, 1)

    def test_user_change_invalidates_directory(self) -> None:
        conn, built, web = _connection()
        _start_and_wait(conn)

        conn.directory.lookup_user("U1")
        built[0].deliver("user_change", {"type": "user_change", "user": {"id": "U1"}})
        conn.directory.lookup_user("U1")

        self.assertEqual(web.calls, [("users_info", "U1"), ("users_info", "U1")])


class TestChatConnectionListeners(unittest.TestCase):
    def test_once_and_remove(self) -> None:
        from fakes import FakeConnection

        conn = FakeConnection()
        calls = []

        def persistent(*args):
            calls.append(("on", args))

        def one_shot(*args):
            calls.append(("once", args))

        conn.on("x", persistent)
        conn.once("x", one_shot)
        self.assertEqual(conn.emit("x", 1), 2)
        self.assertEqual(conn.emit("x", 2), 1)
        self.assertEqual(calls, [("on", (1,)), ("once", (1,)), ("on", (2,))])

        self.assertTrue(conn.remove_listener("x", persistent))
        self.assertFalse(conn.remove_listener("x", persistent))
        self.assertEqual(conn.listener_count("x"), 0)

    def test_failing_listener_does_not_stop_others(self) -> None:
        from fakes import FakeConnection

        conn = FakeConnection()
        calls = []

        def boom(*args):
            raise ValueError("listener bug")

        conn.on("x", boom)
        conn.on("x", lambda *a: calls.append(a))
        self.assertEqual(conn.emit("x", "payload"), 2)
        self.assertEqual(calls, [("payload",)])

        conn.remove_all_listeners()
        self.assertEqual(conn.emit("x"), 0)


if __name__ == "__main__":
    unittest.main()
