from typing import List

from pydantic import BaseModel, Field


class Bouquet(BaseModel):
    """A named bouquet; its flower list is the collection commands mutate."""

    name: str = ""
    flowers: List[str] = Field(default_factory=list)


class BasicBouquet(BaseModel):
    """A priced bouquet before any extras are added."""

    name: str
    base_price: float

    def description(self) -> str:
        return self.name

    def price(self) -> float:
        return self.base_price
