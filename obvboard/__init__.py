"""Board model for PCB layout viewers: parts, pins, nets and outlines built from board-file records."""

__version__ = "0.1.0"
__all__ = ["board", "brd_board"]