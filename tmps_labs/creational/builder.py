from typing import List

from tmps_labs.domain.bouquet import Bouquet


class BouquetBuilder:
    """Fluent builder for Bouquet values."""

    def __init__(self) -> None:
        self._name = ""
        self._flowers: List[str] = []

    def set_name(self, name: str) -> "BouquetBuilder":
        self._name = name
        return self

    def add_flower(self, flower: str) -> "BouquetBuilder":
        self._flowers.append(flower)
        return self

    def build(self) -> Bouquet:
        # Each build gets its own list so later add_flower calls don't leak in.
        return Bouquet(name=self._name, flowers=list(self._flowers))
