# obvboard

A small, dependency-free model of a printed circuit board as a layout viewer
sees it: components, their pins, the nets that join the pins, and the board
outline.

The package has two modules:

- `obvboard.board` holds the board elements: `Point`, `Net`, `Pin`,
  `Component`, the abstract `BoardElement`, the `Board` base class, and the
  enumerations `BoardSide`, `BoardType`, `PinType`, `MountType` and
  `ComponentType`. It also provides the list helpers `is_prefix`, `contains`
  and `remove`.
- `obvboard.brd_board` turns the raw records of a parsed board file into a
  linked board. The raw records are `BRDPoint`, `BRDPart`, `BRDPin` and
  `BRDNail` (with the enumerations `PartMountingSide`, `PartType` and
  `PinSide`), gathered in a `BoardFile`. `BRDBoard` builds the board from
  them.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a board

```python
from obvboard.brd_board import (
    BoardFile, BRDBoard, BRDPart, BRDPin, BRDNail, BRDPoint,
    PartMountingSide, PartType, PinSide,
)

board_file = BoardFile(
    format=[BRDPoint(0, 0), BRDPoint(100, 0), BRDPoint(100, 50)],
    parts=[
        BRDPart(name="U1", mounting_side=PartMountingSide.TOP, part_type=PartType.SMD),
    ],
    pins=[
        BRDPin(part=1, pos=BRDPoint(10, 10), net="GND", side=PinSide.TOP),
        BRDPin(part=1, pos=BRDPoint(20, 10), net="VCC", side=PinSide.TOP),
    ],
    nails=[BRDNail(probe=1, net="VCC", side=PartMountingSide.TOP)],
)

board = BRDBoard(board_file)
for net in board.nets:
    print(net.name, net.is_ground, [pin.number for pin in net.pins])
```

A built board exposes `nets`, `components`, `pins`, `outline_points` and
`outline_segments` as plain lists, and `board_type()` returns
`BoardType.BRD`.

## How the board is put together

- The outline points come from `BoardFile.format`; outline segments are
  copied as pairs of `Point`.
- Nails create nets up front, carrying the nail's probe number and side.
  Nails whose net name starts with `UNCONNECTED` are skipped.
- Nets are sorted by name. There is always a special net named
  `UNCONNECTED`. A pin whose net name starts with `UNCONNECTED`, or whose net
  name is empty, joins that net and gets the pin type `PinType.NOT_CONNECTED`.
  Any other unknown net name creates a new net on the pin's side.
- A net named `GND` or `GROUND` is marked as ground.
- A part whose name starts with `...` is a placeholder for test pads. All of
  its pins become test pads. They belong to one shared dummy component named
  `...`, and the placeholder parts themselves are dropped.
- A pin with no `snum` is numbered by its place in the run of consecutive
  pins of the same part, counting from 1. A pin with no name takes its
  number as its name. A pin's diameter is the record's `radius`.
- A pin whose `part` index (1-based) does not name a part raises
  `ValueError`.
- Components are sorted by name. The dummy component is among them.

Each element has a `unique_id()` made from a prefix and its name or number.
The prefixes are `c_` for components, `p_` for pins and `n_` for nets. Nets
and components also offer `searchable_string_details()`: a component lists
its manufacturing code, a net lists its pins' names and, where they differ,
their numbers.

## What this package does not do

It does not read board files from disk: the caller fills a `BoardFile` with
records from its own parser. It has no drawing, viewer window, search screen
or command-line tool; it only builds and holds the board model.