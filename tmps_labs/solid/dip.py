from typing import Annotated, Callable, Dict, Literal, Union

from pydantic import BaseModel, Field

ALERT_MESSAGE = "System alert triggered!"


class EmailSender(BaseModel):
    kind: Literal["email"] = "email"


class SMSSender(BaseModel):
    kind: Literal["sms"] = "sms"


MessageSender = Annotated[Union[EmailSender, SMSSender], Field(discriminator="kind")]


def _send_email(msg: str) -> None:
    print("📧 Sending email:", msg)


def _send_sms(msg: str) -> None:
    print("📱 Sending SMS:", msg)


SENDERS: Dict[str, Callable[[str], None]] = {
    "email": _send_email,
    "sms": _send_sms,
}


def send(sender: MessageSender, msg: str) -> None:
    SENDERS[sender.kind](msg)


class Notification(BaseModel):
    """Depends on the MessageSender abstraction, never on a concrete channel."""

    sender: MessageSender

    def alert(self) -> None:
        send(self.sender, ALERT_MESSAGE)
