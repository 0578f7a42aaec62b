from types import SimpleNamespace

from simplecloud.elements import CloudElement, ElementCore, ElementType, ElementView


def test_defaults():
    element = CloudElement()
    assert element.name == "d"
    assert element.size == 0
    assert element.element_type is ElementType.NONE
    assert element.view is ElementView.GRID
    assert element.selected is False
    assert element.multi_selection is False


def test_set_selected_notifies():
    element = CloudElement("report.pdf", 10, ElementType.FILE)
    seen = []
    element.on_selected_changed(seen.append)
    element.set_selected(True)
    element.set_selected(False)
    assert seen == [True, False]
    assert element.selected is False


def test_set_view_notifies():
    element = CloudElement()
    seen = []
    element.on_view_changed(seen.append)
    element.set_view(ElementView.LINEAR)
    assert seen == [ElementView.LINEAR]
    assert element.view is ElementView.LINEAR


def test_core_uses_name_as_path():
    info = SimpleNamespace(filepath=":/docs/a.txt")
    element = CloudElement("a.txt", 3, ElementType.FILE, info)
    core = element.core()
    assert core.name == "a.txt"
    assert core.path == "a.txt"
    assert core.info is info


def test_core_equality_ignores_other_info_fields():
    left = ElementCore("a", "p", SimpleNamespace(filepath="x", size=1))
    right = ElementCore("a", "p", SimpleNamespace(filepath="x", size=2))
    assert left == right
    assert hash(left) == hash(right)


def test_core_inequality_on_filepath():
    left = ElementCore("a", "p", SimpleNamespace(filepath="x"))
    right = ElementCore("a", "p", SimpleNamespace(filepath="y"))
    assert not left == right


def test_core_inequality_on_name():
    info = SimpleNamespace(filepath="x")
    assert not ElementCore("a", "p", info) == ElementCore("b", "p", info)