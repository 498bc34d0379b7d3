"""Build a board model from parsed board-file records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from obvboard.board import (
    Board,
    BoardSide,
    BoardType,
    Component,
    ComponentType,
    MountType,
    Net,
    Pin,
    PinType,
    Point,
    is_prefix,
)

NET_UNCONNECTED_PREFIX = "UNCONNECTED"
COMPONENT_DUMMY_NAME = "..."
GROUND_NET_NAMES = frozenset({"GND", "GROUND"})


class PartMountingSide(enum.Enum):
    BOTH = enum.auto()
    BOTTOM = enum.auto()
    TOP = enum.auto()


class PartType(enum.Enum):
    SMD = enum.auto()
    THROUGH_HOLE = enum.auto()


class PinSide(enum.Enum):
    BOTH = enum.auto()
    BOTTOM = enum.auto()
    TOP = enum.auto()


@dataclass
class BRDPoint:
    x: int = 0
    y: int = 0


@dataclass
class BRDPart:
    name: str = ""
    mfgcode: str = ""
    mounting_side: PartMountingSide = PartMountingSide.BOTH
    part_type: PartType = PartType.SMD
    p1: BRDPoint = field(default_factory=BRDPoint)
    p2: BRDPoint = field(default_factory=BRDPoint)


@dataclass
class BRDPin:
    """A pin record; ``part`` is the 1-based index of its part."""

    part: int = 1
    net: str = ""
    pos: BRDPoint = field(default_factory=BRDPoint)
    side: PinSide = PinSide.BOTH
    radius: float = 0.0
    snum: Optional[str] = None
    name: Optional[str] = None


@dataclass
class BRDNail:
    probe: int = 0
    net: str = ""
    pos: BRDPoint = field(default_factory=BRDPoint)
    side: PartMountingSide = PartMountingSide.TOP


@dataclass
class BoardFile:
    """Records read from a board file."""

    parts: list[BRDPart] = field(default_factory=list)
    pins: list[BRDPin] = field(default_factory=list)
    nails: list[BRDNail] = field(default_factory=list)
    format: list[BRDPoint] = field(default_factory=list)
    outline_segments: list[tuple[BRDPoint, BRDPoint]] = field(default_factory=list)


_PART_SIDES = {
    PartMountingSide.TOP: BoardSide.TOP,
    PartMountingSide.BOTTOM: BoardSide.BOTTOM,
}

_PIN_SIDES = {
    PinSide.TOP: BoardSide.TOP,
    PinSide.BOTTOM: BoardSide.BOTTOM,
}


class BRDBoard(Board):
    """Board model built from a :class:`BoardFile`."""

    def __init__(self, board_file: BoardFile) -> None:
        super().__init__()
        self.file = board_file

        self.outline_points = [Point(p.x, p.y) for p in board_file.format]
        self.outline_segments = [
            (Point(a.x, a.y), Point(b.x, b.y)) for a, b in board_file.outline_segments
        ]

        net_map = self._nets_from_nails(board_file.nails)
        self.components = [self._component(part) for part in board_file.parts]
        self._populate_pins(board_file.pins, net_map)

        for name in sorted(net_map):
            net = net_map[name]
            net.is_ground = net.name in GROUND_NET_NAMES
            self.nets.append(net)

        self.components.sort(key=lambda comp: comp.name)

    @staticmethod
    def _nets_from_nails(nails: list[BRDNail]) -> dict[str, Net]:
        net_map = {NET_UNCONNECTED_PREFIX: Net(name=NET_UNCONNECTED_PREFIX)}
        for nail in nails:
            if is_prefix(NET_UNCONNECTED_PREFIX, nail.net):
                continue
            side = BoardSide.TOP if nail.side == PartMountingSide.TOP else BoardSide.BOTTOM
            net_map[nail.net] = Net(name=nail.net, number=nail.probe, board_side=side)
        return net_map

    @staticmethod
    def _component(part: BRDPart) -> Component:
        comp = Component(
            name=part.name,
            mfgcode=part.mfgcode,
            p1=Point(part.p1.x, part.p1.y),
            p2=Point(part.p2.x, part.p2.y),
            board_side=_PART_SIDES.get(part.mounting_side, BoardSide.BOTH),
            mount_type=MountType.SMD if part.part_type == PartType.SMD else MountType.DIP,
        )
        if is_prefix(COMPONENT_DUMMY_NAME, comp.name):
            comp.component_type = ComponentType.DUMMY
        return comp

    def _populate_pins(self, brd_pins: list[BRDPin], net_map: dict[str, Net]) -> None:
        comp_dummy = Component(name=COMPONENT_DUMMY_NAME, component_type=ComponentType.DUMMY)
        unconnected = net_map[NET_UNCONNECTED_PREFIX]

        pin_idx = 0
        part_idx = 1
        for brd_pin in brd_pins:
            if not 1 <= brd_pin.part <= len(self.components):
                raise ValueError(f"pin refers to unknown part {brd_pin.part}")
            comp = self.components[brd_pin.part - 1]

            pin = Pin()
            if comp.is_dummy():
                pin.type = PinType.TEST_PAD
                pin.component = comp_dummy
                comp_dummy.pins.append(pin)
            else:
                pin.type = PinType.COMPONENT
                pin.component = comp
                comp.pins.append(pin)

            pin_idx += 1
            if brd_pin.part != part_idx:
                part_idx = brd_pin.part
                pin_idx = 1
            pin.number = brd_pin.snum if brd_pin.snum is not None else str(pin_idx)
            pin.name = brd_pin.name if brd_pin.name is not None else pin.number

            pin.position = Point(brd_pin.pos.x, brd_pin.pos.y)
            pin.board_side = _PIN_SIDES.get(brd_pin.side, BoardSide.BOTH)

            net_name = brd_pin.net
            if net_name in net_map:
                pin.net = net_map[net_name]
            elif net_name and not is_prefix(NET_UNCONNECTED_PREFIX, net_name):
                net = Net(name=net_name, board_side=pin.board_side)
                net_map[net_name] = net
                pin.net = net
            else:
                pin.net = unconnected
                pin.type = PinType.NOT_CONNECTED

            pin.diameter = brd_pin.radius

            pin.net.pins.append(pin)
            self.pins.append(pin)

        self.components = [comp for comp in self.components if not comp.is_dummy()]
        self.components.append(comp_dummy)

    def board_type(self) -> BoardType:
        return BoardType.BRD