import pytest

from obvboard.board import (
    Board,
    BoardElement,
    BoardSide,
    BoardType,
    Component,
    ComponentType,
    MountType,
    Net,
    Pin,
    Point,
    contains,
    is_prefix,
    remove,
)


@pytest.mark.parametrize(
    "prefix, base, expected",
    [
        ("UNCONNECTED", "UNCONNECTED_42", True),
        ("UNCONNECTED", "UNCONNECTED", True),
        ("UNCONNECTED", "UNCONN", False),
        ("...", "...TP", True),
        ("...", "R12", False),
        ("", "anything", True),
    ],
)
def test_is_prefix(prefix, base, expected):
    assert is_prefix(prefix, base) is expected


def test_contains_uses_identity_for_elements():
    a, b = Net(name="A"), Net(name="A")
    items = [a]
    assert contains(a, items) is True
    assert contains(b, items) is False


def test_remove_swaps_with_last():
    items = ["a", "b", "c", "d"]
    remove("b", items)
    assert items == ["a", "d", "c"]


def test_remove_missing_is_noop():
    items = ["a", "b"]
    remove("z", items)
    assert items == ["a", "b"]


def test_remove_last_element():
    items = ["a"]
    remove("a", items)
    assert items == []


def test_unique_ids_use_prefixes():
    assert Net(name="GND").unique_id() == "n_GND"
    assert Pin(number="7").unique_id() == "p_7"
    assert Component(name="U1").unique_id() == "c_U1"


def test_default_board_side_is_both():
    assert Net().board_side == BoardSide.BOTH
    assert Component().board_side == BoardSide.BOTH


def test_board_element_is_abstract():
    with pytest.raises(TypeError):
        BoardElement()


@pytest.mark.parametrize(
    "mount, text",
    [(MountType.SMD, "SMD"), (MountType.DIP, "DIP"), (MountType.UNKNOWN, "UNKNOWN")],
)
def test_mount_type_str(mount, text):
    assert Component(mount_type=mount).mount_type_str() == text


def test_is_dummy():
    assert Component(component_type=ComponentType.DUMMY).is_dummy() is True
    assert Component(component_type=ComponentType.IC).is_dummy() is False


def test_component_searchable_details():
    assert Component(name="U1", mfgcode="LM358").searchable_string_details() == ["LM358"]


def test_net_searchable_details_skip_duplicate_numbers():
    net = Net(name="VCC")
    net.pins.append(Pin(number="1", name="1"))
    net.pins.append(Pin(number="4", name="A4"))
    assert net.searchable_string_details() == ["1", "A4", "4"]


def test_point_converts_to_float():
    p = Point(3, 5)
    assert (p.x, p.y) == (3.0, 5.0)
    assert isinstance(p.x, float)


def test_base_board_is_empty_and_unknown():
    board = Board()
    assert board.board_type() == BoardType.UNKNOWN
    assert board.nets == [] and board.pins == [] and board.components == []