from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

from tmps_labs.domain.bouquet import BasicBouquet


class Extra(str, Enum):
    RIBBON = "ribbon"
    CARD = "card"
    VASE = "vase"


SURCHARGES: Dict[Extra, float] = {
    Extra.RIBBON: 3.5,
    Extra.CARD: 5,
    Extra.VASE: 25,
}


class DecoratedBouquet(BaseModel):
    """
    A base bouquet plus an ordered list of extras.

    Each extra is one step applied to the base value in list order,
    appending to the description and adding its surcharge to the price.
    """

    base: BasicBouquet
    extras: List[Extra] = Field(default_factory=list)

    def with_extra(self, extra: Extra) -> "DecoratedBouquet":
        return DecoratedBouquet(base=self.base, extras=[*self.extras, extra])

    def description(self) -> str:
        description = self.base.description()
        for extra in self.extras:
            description += f", with {extra.value}"
        return description

    def price(self) -> float:
        price = self.base.price()
        for extra in self.extras:
            price += SURCHARGES[extra]
        return price
