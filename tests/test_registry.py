from debugglass.content import Frame
from debugglass.registry import (
    DEFAULT_TAB_TITLE,
    EMPTY_MESSAGE,
    SubWindow,
    SubWindowRegistry,
)


def _render(content) -> list[str]:
    frame = Frame()
    content.render(frame)
    return frame.lines()


def test_subwindow_name():
    assert SubWindow("Stats").name == "Stats"


def test_subwindow_without_tabs_shows_placeholder():
    assert _render(SubWindow("w")) == [EMPTY_MESSAGE]
    assert EMPTY_MESSAGE == "No tabs defined"


def test_callback_drawn_before_placeholder():
    window = SubWindow("w")
    window.set_render_callback(lambda frame: frame.text("intro"))
    assert _render(window) == ["intro", EMPTY_MESSAGE]


def test_tab_collection_add_and_find():
    window = SubWindow("w")
    tab = window.tabs.add("tab1")
    assert tab.label == "tab1"
    assert window.tabs.find("tab1") is tab
    assert window.find_tab("tab1") is tab
    assert window.tabs.find("missing") is None


def test_duplicate_tab_labels_find_first():
    window = SubWindow("w")
    first = window.add_tab("same")
    second = window.add_tab("same")
    assert first is not second
    assert window.find_tab("same") is first


def test_render_sections_per_tab():
    window = SubWindow("w")
    first = window.add_tab("one")
    first.set_render_callback(lambda frame: frame.text("a"))
    window.add_tab("two")
    lines = _render(window)
    assert lines[0] == "one"
    assert lines[2] == "two"
    assert lines[1].strip() == "a"
    assert lines[1].startswith(" ")
    assert lines[3].strip() == _render(window.find_tab("two"))[0]


def test_empty_tab_label_uses_default_title():
    window = SubWindow("w")
    window.add_tab("")
    assert _render(window)[0] == DEFAULT_TAB_TITLE
    assert DEFAULT_TAB_TITLE == "Tab"


def test_registry_add_is_idempotent():
    registry = SubWindowRegistry()
    first = registry.add("Stats")
    second = registry.add("Stats")
    assert first is second
    assert len(registry) == 1


def test_getitem_creates_and_returns_same():
    registry = SubWindowRegistry()
    created = registry["Variables"]
    assert created.name == "Variables"
    assert registry["Variables"] is created
    assert registry.find("Variables") is created


def test_find_does_not_create():
    registry = SubWindowRegistry()
    assert registry.find("nope") is None
    assert "nope" not in registry
    assert len(registry) == 0


def test_snapshot_contains_all_windows():
    registry = SubWindowRegistry()
    names = ["Stats", "Variables", "Messages"]
    windows = [registry.add(name) for name in names]
    snapshot = registry.snapshot()
    assert sorted(w.name for w in snapshot) == sorted(names)
    assert all(any(w is s for s in snapshot) for w in windows)


def test_snapshot_is_independent_copy():
    registry = SubWindowRegistry()
    registry.add("a")
    snapshot = registry.snapshot()
    registry.add("b")
    assert [w.name for w in snapshot] == ["a"]
    assert len(registry.snapshot()) == 2