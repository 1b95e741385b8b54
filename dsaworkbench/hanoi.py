"""Towers of Hanoi solved with stacks."""

from __future__ import annotations


class Tower:
    """A peg holding a stack of disks, smallest on top."""

    def __init__(self, index: int) -> None:
        self.index = index
        self._disks: list[int] = []

    @property
    def disks(self) -> tuple[int, ...]:
        """Disks from bottom to top."""
        return tuple(self._disks)

    def __len__(self) -> int:
        return len(self._disks)

    def __repr__(self) -> str:
        return f"Tower(index={self.index}, disks={self._disks!r})"

    def add(self, disk: int) -> None:
        """Place a disk on top; it must be smaller than the current top."""
        if self._disks and self._disks[-1] <= disk:
            raise ValueError(f"cannot place disk {disk} on tower {self.index}")
        self._disks.append(disk)

    def move_top_to(self, other: Tower) -> None:
        """Move the top disk of this tower onto ``other``."""
        if not self._disks:
            raise IndexError(f"tower {self.index} has no disks")
        other.add(self._disks[-1])
        self._disks.pop()

    def move_disks(self, n: int, destination: Tower, buffer: Tower) -> None:
        """Move the top ``n`` disks to ``destination`` using ``buffer``."""
        if n > 0:
            self.move_disks(n - 1, buffer, destination)
            self.move_top_to(destination)
            buffer.move_disks(n - 1, destination, self)


def solve_hanoi(disk_count: int) -> list[Tower]:
    """Stack ``disk_count`` disks on the first tower and move them to the last.

    Returns the three towers after the moves.
    """
    towers = [Tower(index) for index in range(3)]
    if disk_count <= 0:
        return towers
    for disk in range(disk_count - 1, -1, -1):
        towers[0].add(disk)
    towers[0].move_disks(disk_count, towers[2], towers[1])
    return towers