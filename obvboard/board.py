"""Board model: nets, pins and components placed on a circuit board."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any, Optional

COMPONENT_PREFIX = "c_"
PIN_PREFIX = "p_"
NET_PREFIX = "n_"
ELEMENT_NAME_LENGTH = 127


class BoardSide(enum.IntEnum):
    TOP = 0
    BOTTOM = 1
    BOTH = 2


class BoardType(enum.IntEnum):
    UNKNOWN = 0
    BRD = 0x01
    BDV = 0x02


class PinType(enum.IntEnum):
    UNKNOWN = 0
    NOT_CONNECTED = 1
    COMPONENT = 2
    VIA = 3
    TEST_PAD = 4


class MountType(enum.IntEnum):
    UNKNOWN = 0
    SMD = 1
    DIP = 2


class ComponentType(enum.IntEnum):
    UNKNOWN = 0
    DUMMY = 1
    CONNECTOR = 2
    IC = 3
    RESISTOR = 4
    CAPACITOR = 5
    DIODE = 6
    TRANSISTOR = 7
    CRYSTAL = 8
    JELLY_BEAN = 9


class ComponentVisualMode(enum.IntEnum):
    NORMAL = 0
    SELECTED = 1


def is_prefix(prefix: str, base: str) -> bool:
    """Return True if ``prefix`` is a prefix of ``base``."""
    return base.startswith(prefix)


def contains(element: Any, items: list) -> bool:
    """Return True if ``element`` is present in ``items``."""
    return element in items


def remove(element: Any, items: list) -> None:
    """Remove the first occurrence of ``element`` by swapping it with the last item.

    The order of the remaining items is not preserved. Absent elements are ignored.
    """
    try:
        index = items.index(element)
    except ValueError:
        return
    items[index] = items[-1]
    items.pop()


@dataclass
class Point:
    """A position on the board, relative to its top-left corner."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)


@dataclass(eq=False)
class BoardElement(abc.ABC):
    """Anything that sits on the board."""

    board_side: BoardSide = field(default=BoardSide.BOTH, kw_only=True)

    @abc.abstractmethod
    def unique_id(self) -> str:
        """String uniquely identifying this element on the board."""


@dataclass(eq=False)
class Net(BoardElement):
    """Shared potential between several pins."""

    name: str = ""
    number: int = 0
    is_ground: bool = False
    pins: list[Pin] = field(default_factory=list)

    def unique_id(self) -> str:
        return NET_PREFIX + self.name

    def searchable_string_details(self) -> list[str]:
        """Pin names of this net, plus pin numbers where they differ from the name."""
        result: list[str] = []
        for pin in self.pins:
            result.append(pin.name)
            if pin.number != pin.name:
                result.append(pin.number)
        return result


@dataclass(eq=False)
class Pin(BoardElement):
    """An observable contact: a component pin, a via or a test pad."""

    type: PinType = PinType.UNKNOWN
    number: str = ""
    name: str = ""
    position: Point = field(default_factory=Point)
    diameter: float = 0.0
    net: Optional[Net] = None
    component: Optional[Component] = None

    def unique_id(self) -> str:
        return PIN_PREFIX + self.number


@dataclass(eq=False)
class Component(BoardElement):
    """A part on the board with its pins."""

    name: str = ""
    mfgcode: str = ""
    mount_type: MountType = MountType.UNKNOWN
    component_type: ComponentType = ComponentType.UNKNOWN
    pins: list[Pin] = field(default_factory=list)
    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)
    outline: list[Point] = field(default_factory=lambda: [Point() for _ in range(4)])
    outline_done: bool = False
    hull: list[Point] = field(default_factory=list)
    omin: Point = field(default_factory=Point)
    omax: Point = field(default_factory=Point)
    centerpoint: Point = field(default_factory=Point)
    expanse: float = 0.0
    visualmode: ComponentVisualMode = ComponentVisualMode.NORMAL

    def mount_type_str(self) -> str:
        if self.mount_type == MountType.SMD:
            return "SMD"
        if self.mount_type == MountType.DIP:
            return "DIP"
        return "UNKNOWN"

    def is_dummy(self) -> bool:
        """True if the component does not represent a physical part."""
        return self.component_type == ComponentType.DUMMY

    def unique_id(self) -> str:
        return COMPONENT_PREFIX + self.name

    def searchable_string_details(self) -> list[str]:
        return [self.mfgcode]


class Board:
    """A loaded board: its nets, components, pins and outline."""

    def __init__(self) -> None:
        self.nets: list[Net] = []
        self.components: list[Component] = []
        self.pins: list[Pin] = []
        self.outline_points: list[Point] = []
        self.outline_segments: list[tuple[Point, Point]] = []

    def board_type(self) -> BoardType:
        return BoardType.UNKNOWN