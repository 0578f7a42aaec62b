from simplecloud.elements import CloudElement, ElementType
from simplecloud.filechecker import is_name_available


def _folder(*names):
    return [CloudElement(name, 1, ElementType.FILE) for name in names]


def test_free_name():
    assert is_name_available("new.txt", _folder("a.txt", "b.txt")) is True


def test_taken_name():
    assert is_name_available("b.txt", _folder("a.txt", "b.txt")) is False


def test_empty_folder():
    assert is_name_available("anything", []) is True


def test_case_sensitive():
    assert is_name_available("A.TXT", _folder("a.txt")) is True


def test_accepts_generator():
    elements = (element for element in _folder("x", "y"))
    assert is_name_available("y", elements) is False