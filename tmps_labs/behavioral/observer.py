import logging
from typing import Callable, Dict, List, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class EmailNotifier(BaseModel):
    kind: Literal["email"] = "email"


Observer = EmailNotifier


def _email_update(observer: EmailNotifier, status: str) -> None:
    print(f"📧 Email: order status changed to {status}")


UPDATERS: Dict[str, Callable[..., None]] = {
    "email": _email_update,
}


def update(observer: Observer, status: str) -> None:
    UPDATERS[observer.kind](observer, status)


class Order(BaseModel):
    """Subject whose status changes are pushed to attached observers."""

    status: str = ""
    observers: List[Observer] = Field(default_factory=list)

    def attach(self, observer: Observer) -> None:
        self.observers.append(observer)

    def notify(self) -> None:
        logger.debug(f"Notifying {len(self.observers)} observer(s) of status '{self.status}'")
        for observer in self.observers:
            update(observer, self.status)

    def set_status(self, status: str) -> None:
        self.status = status
        self.notify()
