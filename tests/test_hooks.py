"""Tests for restshim.host.hooks — filters and actions."""

from restshim.host.hooks import Hooks


class TestFilters:
    def test_no_filters_returns_value(self) -> None:
        assert Hooks().apply_filters("missing", 42) == 42

    def test_filters_chain_with_extra_args(self) -> None:
        hooks = Hooks()
        hooks.add_filter("name", lambda value, suffix: value + suffix)
        hooks.add_filter("name", lambda value, suffix: value.upper())
        assert hooks.apply_filters("name", "a", "b") == "AB"

    def test_priority_then_registration_order(self) -> None:
        hooks = Hooks()
        calls: list[str] = []
        hooks.add_filter("f", lambda v: calls.append("late") or v, priority=20)
        hooks.add_filter("f", lambda v: calls.append("first") or v)
        hooks.add_filter("f", lambda v: calls.append("second") or v)
        hooks.add_filter("f", lambda v: calls.append("early") or v, priority=5)
        hooks.apply_filters("f", None)
        assert calls == ["early", "first", "second", "late"]

    def test_remove_filter(self) -> None:
        hooks = Hooks()

        def double(value: int) -> int:
            return value * 2

        hooks.add_filter("f", double)
        assert hooks.has_filter("f")
        assert hooks.remove_filter("f", double) is True
        assert hooks.remove_filter("f", double) is False
        assert not hooks.has_filter("f")
        assert hooks.apply_filters("f", 3) == 3


class TestActions:
    def test_do_action_calls_callbacks(self) -> None:
        hooks = Hooks()
        seen: list[tuple[int, int]] = []
        hooks.add_action("a", lambda x, y: seen.append((x, y)))
        hooks.do_action("a", 1, 2)
        assert seen == [(1, 2)]

    def test_did_action_counts_firings(self) -> None:
        hooks = Hooks()
        assert hooks.did_action("a") == 0
        hooks.do_action("a")
        hooks.do_action("a")
        assert hooks.did_action("a") == 2

    def test_remove_action(self) -> None:
        hooks = Hooks()
        seen: list[str] = []

        def record() -> None:
            seen.append("called")

        hooks.add_action("a", record)
        hooks.remove_action("a", record)
        hooks.do_action("a")
        assert seen == []
        assert hooks.did_action("a") == 1

    def test_callback_added_during_firing_waits_for_next(self) -> None:
        hooks = Hooks()
        seen: list[str] = []

        def register_more() -> None:
            seen.append("outer")
            hooks.add_action("a", lambda: seen.append("inner"))

        hooks.add_action("a", register_more)
        hooks.do_action("a")
        assert seen == ["outer"]
