import unittest

from fakes import FakeDirectory, Sink


def _router(directory=None):
    from slackchat.kernel.registry import ChannelRegistry
    from slackchat.ports.chat.router import EventRouter

    reg = ChannelRegistry()
    sink = Sink()
    router = EventRouter(reg, sink, directory=lambda: directory)
    return router, reg, sink


DIRECTORY = FakeDirectory(
    users={"U1": {"name": "jdoe", "real_name": "Jane Doe"}, "U2": {"name": "bob"}},
    channels={"C9": {"name": "random"}},
)


class TestEventRouter(unittest.TestCase):
    def test_plain_message_is_published(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")

        router.on_inbound_event({"type": "message", "channel": "C1", "user": "U1", "text": "see <#C9> :smile:"})

        self.assertEqual(
            sink.published,
            [
                (
                    "node5",
                    {
                        "callback": "slackChatHandler",
                        "channel": "node5",
                        "event": "message",
                        "text": "see #random \U0001F604",
                        "user": "Jane Doe",
                    },
                )
            ],
        )

    def test_username_falls_back_to_handle_then_anonymous(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")

        router.on_inbound_event({"type": "message", "channel": "C1", "user": "U2", "text": "a"})
        router.on_inbound_event({"type": "message", "channel": "C1", "user": "U404", "text": "b"})
        router.on_inbound_event({"type": "message", "channel": "C1", "text": "c"})

        self.assertEqual([m["user"] for _, m in sink.published], ["bob", "Anonymous", "Anonymous"])

    def test_no_directory_means_anonymous(self) -> None:
        router, reg, sink = _router(None)
        reg.register("C1", "node5")

        router.on_inbound_event({"type": "message", "channel": "C1", "user": "U1", "text": "<@U1>"})

        self.assertEqual(sink.published[0][1]["user"], "Anonymous")
        self.assertEqual(sink.published[0][1]["text"], "<@U1>")

    def test_unregistered_channel_is_dropped(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")

        for raw in (
            {"type": "message", "channel": "C2", "user": "U1", "text": "hi"},
            {"type": "message", "subtype": "channel_archive", "channel": "C2", "user": "U1"},
        ):
            self.assertIsNone(router.on_inbound_event(raw))
        self.assertEqual(sink.published, [])
        self.assertEqual(reg.resolve("C1"), "node5")

    def test_bot_and_slackbot_messages_are_dropped(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")

        router.on_inbound_event({"type": "message", "channel": "C1", "user": "U1", "bot_id": "B1", "text": "x"})
        router.on_inbound_event({"type": "message", "channel": "C1", "user": "USLACKBOT", "text": "reminder"})
        router.on_inbound_event({"type": "message", "subtype": "channel_archive", "channel": "C1", "user": "USLACKBOT"})

        self.assertEqual(sink.published, [])
        self.assertEqual(reg.resolve("C1"), "node5")

    def test_other_subtypes_are_dropped(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")

        router.on_inbound_event({"type": "message", "subtype": "message_changed", "channel": "C1", "user": "U1"})
        router.on_inbound_event({"type": "message", "subtype": "channel_join", "channel": "C1", "user": "U1"})
        router.on_inbound_event({"type": "reaction_added", "channel": "C1", "user": "U1"})

        self.assertEqual(sink.published, [])

    def test_archive_ends_channel_once(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")
        archive = {"type": "message", "subtype": "channel_archive", "channel": "C1", "user": "U1"}

        router.on_inbound_event(archive)
        router.on_inbound_event(archive)
        router.on_inbound_event({"type": "message", "channel": "C1", "user": "U1", "text": "late"})

        self.assertEqual(
            sink.published,
            [("node5", {"callback": "slackChatHandler", "channel": "node5", "event": "ended"})],
        )
        self.assertIsNone(reg.resolve("C1"))

    def test_publish_failure_does_not_raise(self) -> None:
        from slackchat.kernel.registry import ChannelRegistry
        from slackchat.ports.chat.router import EventRouter

        def broken(channel, message):
            raise RuntimeError("subscriber gone")

        reg = ChannelRegistry()
        reg.register("C1", "node5")
        router = EventRouter(reg, broken, directory=lambda: DIRECTORY)

        env = router.on_inbound_event({"type": "message", "channel": "C1", "user": "U1", "text": "hi"})
        self.assertIsNotNone(env)

    def test_malformed_payloads_are_dropped(self) -> None:
        router, reg, sink = _router(DIRECTORY)
        reg.register("C1", "node5")

        for raw in (None, "text", 42, [], {"channel": "C1"}):
            self.assertIsNone(router.on_inbound_event(raw))
        self.assertEqual(sink.published, [])


if __name__ == "__main__":
    unittest.main()
