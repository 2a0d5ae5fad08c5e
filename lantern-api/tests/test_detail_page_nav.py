"""Tests for detail page navigation."""

import pytest

from app.navigation import (
    NAVIGATE_EVENT,
    DetailPageNav,
    Direction,
    KeyboardEventSource,
    KeyEvent,
    find_neighbors,
)


class FakeRouter:
    def __init__(self):
        self.pushed = []

    def push(self, url):
        self.pushed.append(url)


class FakeAnalytics:
    def __init__(self):
        self.events = []

    def capture(self, event):
        self.events.append(event)


def trace_path(trace_id):
    return f"/project/p1/traces/{trace_id}"


@pytest.fixture
def router():
    return FakeRouter()


@pytest.fixture
def analytics():
    return FakeAnalytics()


@pytest.fixture
def make_nav(router, analytics):
    def _make(current_id, ids=("a", "b", "c")):
        lists = {"traces": list(ids)} if ids is not None else {}
        return DetailPageNav(
            current_id=current_id,
            path=trace_path,
            list_key="traces",
            lists=lists,
            router=router,
            analytics=analytics,
        )

    return _make


class TestFindNeighbors:

    def test_middle(self):
        neighbors = find_neighbors(["a", "b", "c"], "b")
        assert neighbors.previous == "a"
        assert neighbors.next == "c"

    def test_first_has_no_previous(self):
        neighbors = find_neighbors(["a", "b", "c"], "a")
        assert neighbors.previous is None
        assert neighbors.next == "b"

    def test_last_has_no_next(self):
        neighbors = find_neighbors(["a", "b", "c"], "c")
        assert neighbors.previous == "b"
        assert neighbors.next is None

    def test_single_entry(self):
        neighbors = find_neighbors(["a"], "a")
        assert neighbors.previous is None
        assert neighbors.next is None

    def test_empty_list(self):
        neighbors = find_neighbors([], "a")
        assert neighbors.previous is None
        assert neighbors.next is None

    def test_unknown_id_points_to_first_entry(self):
        neighbors = find_neighbors(["a", "b"], "z")
        assert neighbors.previous is None
        assert neighbors.next == "a"

    @pytest.mark.parametrize("length", [2, 3, 7])
    def test_next_then_previous_returns_to_start(self, length):
        ids = [f"id-{i}" for i in range(length)]
        for current in ids[:-1]:
            following = find_neighbors(ids, current).next
            assert find_neighbors(ids, following).previous == current


class TestRender:

    def test_no_list_renders_nothing(self, make_nav):
        assert make_nav("a", ids=None).render() is None

    def test_empty_list_renders_nothing(self, make_nav):
        assert make_nav("a", ids=[]).render() is None

    def test_controls(self, make_nav):
        up, down = make_nav("b").render()

        assert up.direction == Direction.UP
        assert up.label == "Navigate up"
        assert up.shortcut == "k"
        assert up.disabled is False
        assert up.href == "/project/p1/traces/a"

        assert down.direction == Direction.DOWN
        assert down.label == "Navigate down"
        assert down.shortcut == "j"
        assert down.disabled is False
        assert down.href == "/project/p1/traces/c"

    def test_boundaries_disable_controls(self, make_nav):
        up, down = make_nav("a").render()
        assert up.disabled is True
        assert up.href is None
        assert down.disabled is False

        up, down = make_nav("c").render()
        assert up.disabled is False
        assert down.disabled is True

    def test_recomputed_after_update(self, make_nav):
        nav = make_nav("a")
        assert nav.previous_id is None

        nav.update(current_id="c")
        assert nav.previous_id == "b"
        assert nav.next_id is None

        nav.update(lists={"traces": ["c", "d"]})
        assert nav.previous_id is None
        assert nav.next_id == "d"

    def test_update_rejects_unknown_inputs(self, make_nav):
        with pytest.raises(TypeError):
            make_nav("a").update(colour="blue")


class TestClick:

    def test_click_navigates_and_captures_event(self, make_nav, router, analytics):
        nav = make_nav("b")

        assert nav.click(Direction.DOWN) == "/project/p1/traces/c"
        assert nav.click(Direction.UP) == "/project/p1/traces/a"

        assert router.pushed == ["/project/p1/traces/c", "/project/p1/traces/a"]
        assert analytics.events == [NAVIGATE_EVENT, NAVIGATE_EVENT]

    def test_disabled_control_does_nothing(self, make_nav, router, analytics):
        assert make_nav("a").click(Direction.UP) is None
        assert router.pushed == []
        assert analytics.events == []


class TestKeyboard:

    def test_k_and_j(self, make_nav, router, analytics):
        nav = make_nav("b")

        nav.handle_key_down(KeyEvent("k"))
        nav.handle_key_down(KeyEvent("j"))

        assert router.pushed == ["/project/p1/traces/a", "/project/p1/traces/c"]
        # Keyboard navigation is not tracked
        assert analytics.events == []

    def test_other_keys_ignored(self, make_nav, router):
        make_nav("b").handle_key_down(KeyEvent("x"))
        assert router.pushed == []

    def test_boundary_keys_ignored(self, make_nav, router):
        make_nav("a").handle_key_down(KeyEvent("k"))
        make_nav("c").handle_key_down(KeyEvent("j"))
        assert router.pushed == []

    @pytest.mark.parametrize("key", ["k", "j"])
    def test_ignored_while_typing_in_input(self, make_nav, router, key):
        make_nav("b").handle_key_down(KeyEvent(key, active_element="input"))
        make_nav("b").handle_key_down(KeyEvent(key, active_element="INPUT"))
        assert router.pushed == []

    def test_other_focused_elements_do_not_block(self, make_nav, router):
        make_nav("b").handle_key_down(KeyEvent("j", active_element="button"))
        assert router.pushed == ["/project/p1/traces/c"]


class TestMounting:

    def test_listens_only_while_mounted(self, make_nav, router):
        window = KeyboardEventSource()
        nav = make_nav("b")

        with nav.mounted(window):
            assert window.listener_count == 1
            window.dispatch(KeyEvent("j"))

        assert window.listener_count == 0
        window.dispatch(KeyEvent("k"))
        assert router.pushed == ["/project/p1/traces/c"]

    def test_repeated_mounts_do_not_leak(self, make_nav):
        window = KeyboardEventSource()
        nav = make_nav("b")

        for _ in range(5):
            with nav.mounted(window):
                assert window.listener_count == 1

        assert window.listener_count == 0

    def test_listener_removed_on_error(self, make_nav):
        window = KeyboardEventSource()

        with pytest.raises(RuntimeError):
            with make_nav("b").mounted(window):
                raise RuntimeError("render failed")

        assert window.listener_count == 0

    def test_mounted_listener_sees_updated_inputs(self, make_nav, router):
        window = KeyboardEventSource()
        nav = make_nav("a")

        with nav.mounted(window):
            nav.update(current_id="c")
            window.dispatch(KeyEvent("k"))

        assert router.pushed == ["/project/p1/traces/b"]


class TestEmptyIds:
    """An empty id counts as no neighbour for buttons and keys alike."""

    def test_empty_previous_id_disables_everything(self, make_nav, router, analytics):
        nav = make_nav("b", ids=["", "b"])

        up, _ = nav.render()
        assert up.disabled is True
        assert up.href is None

        assert nav.handle_key_down(KeyEvent("k")) is None
        assert nav.click(Direction.UP) is None
        assert router.pushed == []
        assert analytics.events == []

    def test_empty_next_id_disables_everything(self, make_nav, router):
        nav = make_nav("a", ids=["a", ""])

        _, down = nav.render()
        assert down.disabled is True
        assert nav.handle_key_down(KeyEvent("j")) is None
        assert nav.click(Direction.DOWN) is None
        assert router.pushed == []
