from fakes import FakeDirectory

from slackchat.kernel.markup import display_name, translate


DIRECTORY = FakeDirectory(
    users={
        "U1": {"name": "jdoe", "real_name": "Jane Doe"},
        "U2": {"name": "bob", "real_name": ""},
    },
    channels={"C123": {"name": "general"}},
)


def test_channel_reference_resolves_to_name() -> None:
    assert translate("<#C123>", DIRECTORY) == "#general"


def test_unresolved_channel_reference_is_left_alone() -> None:
    assert translate("<#C123>", FakeDirectory()) == "<#C123>"


def test_user_reference_prefers_real_name() -> None:
    assert translate("hi <@U1>!", DIRECTORY) == "hi @Jane Doe!"


def test_user_reference_falls_back_to_handle() -> None:
    assert translate("<@U2> joined", DIRECTORY) == "@bob joined"


def test_unknown_user_reference_is_left_alone() -> None:
    assert translate("ping <@U999>", DIRECTORY) == "ping <@U999>"


def test_links_and_malformed_brackets_pass_through() -> None:
    text = "see <https://example.com|docs> and <!here> or <foo> and a < b > c"
    assert translate(text, DIRECTORY) == text


def test_known_emoji_is_replaced() -> None:
    assert translate(":smile:", DIRECTORY) == "\U0001F604"
    assert translate("nice :+1: :-1:", DIRECTORY) == "nice \U0001F44D \U0001F44E"


def test_keycap_and_variation_selector_emoji() -> None:
    assert translate("count :two: :hash:", DIRECTORY) == "count 2\uFE0F\u20E3 #\uFE0F\u20E3"
    assert translate(":relaxed:", DIRECTORY) == "\u263A\uFE0F"


def test_unknown_emoji_is_left_alone() -> None:
    assert translate(":not_a_real_emoji:", DIRECTORY) == ":not_a_real_emoji:"


def test_text_without_tokens_is_unchanged() -> None:
    for text in ("", "plain words", "time is 10:30 today", "a:b:c"):
        assert translate(text, DIRECTORY) == text


def test_repeated_tokens_are_all_replaced() -> None:
    out = translate("<@U1> <@U1> :tada: :tada:", DIRECTORY)
    assert out == "@Jane Doe @Jane Doe \U0001F389 \U0001F389"


def test_references_and_emoji_together() -> None:
    out = translate("<@U1> moved to <#C123> :rocket:", DIRECTORY)
    assert out == "@Jane Doe moved to #general \U0001F680"


def test_directory_errors_degrade_to_literal_token() -> None:
    class Broken:
        def lookup_user(self, user_id):
            raise RuntimeError("api down")

        def lookup_channel(self, channel_id):
            raise RuntimeError("api down")

    assert translate("<@U1> in <#C123>", Broken()) == "<@U1> in <#C123>"


def test_display_name() -> None:
    assert display_name({"name": "a", "real_name": "A B"}) == "A B"
    assert display_name({"name": "a"}) == "a"
    assert display_name(None) == ""
