from typing import Dict, List


class Indices:
    """Working set of unit ids ``0..n-1`` with constant-time removal.

    Removal swaps the removed id with the last element, so the order of
    ``list()`` changes as units are removed.
    """

    def __init__(self, size: int):
        self._list: List[int] = list(range(size))
        self._position: Dict[int, int] = {i: i for i in range(size)}

    def __len__(self) -> int:
        return len(self._list)

    def __contains__(self, unit: int) -> bool:
        return unit in self._position

    def list(self) -> List[int]:
        return self._list

    def remove(self, unit: int) -> None:
        """Remove ``unit`` from the set.

        Raises:
            KeyError: If ``unit`` is not in the set
        """
        position = self._position.pop(unit)
        last = self._list.pop()
        if last != unit:
            self._list[position] = last
            self._position[last] = position
