"""
Command pattern: reversible actions on a bouquet and the undo history.

Actions are plain data tagged by ``kind``. What an action does, and how
it is reversed, lives in the dispatch tables below; the manager only
orders calls through them.
"""

import logging
from typing import Callable, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel

from tmps_labs.core.exceptions import UndoMismatchError
from tmps_labs.domain.bouquet import Bouquet

logger = logging.getLogger(__name__)


class AddFlower(BaseModel):
    """Append ``flower`` to ``bouquet.flowers``."""

    kind: Literal["add_flower"] = "add_flower"
    bouquet: Bouquet
    flower: str


# Only one variant today; new ones join this union and every table below.
Action = Union[AddFlower]


def _execute_add_flower(action: AddFlower) -> None:
    action.bouquet.flowers.append(action.flower)


def _undo_add_flower(action: AddFlower) -> None:
    flowers = action.bouquet.flowers
    if not flowers or flowers[-1] != action.flower:
        last = flowers[-1] if flowers else None
        logger.error(
            f"Cannot undo {describe(action)}: bouquet '{action.bouquet.name}' ends with {last!r}"
        )
        raise UndoMismatchError(
            f"Last flower of '{action.bouquet.name}' is not '{action.flower}'",
            details={"expected": action.flower, "found": last},
        )
    flowers.pop()


def _describe_add_flower(action: AddFlower) -> str:
    return f"Add flower '{action.flower}'"


EXECUTORS: Dict[str, Callable[..., None]] = {
    "add_flower": _execute_add_flower,
}

REVERSERS: Dict[str, Callable[..., None]] = {
    "add_flower": _undo_add_flower,
}

DESCRIBERS: Dict[str, Callable[..., str]] = {
    "add_flower": _describe_add_flower,
}


def execute(action: Action) -> None:
    EXECUTORS[action.kind](action)


def undo(action: Action) -> None:
    REVERSERS[action.kind](action)


def describe(action: Action) -> str:
    return DESCRIBERS[action.kind](action)


class CommandManager:
    """Runs actions immediately and keeps them on a LIFO undo history."""

    def __init__(self) -> None:
        self._history: List[Action] = []

    def run(self, action: Action) -> None:
        execute(action)
        self._history.append(action)
        logger.debug(f"Ran {describe(action)} (history size {len(self._history)})")

    def undo(self) -> None:
        """
        Reverse the most recent action.

        An empty history is a no-op. If the action can no longer be
        reversed, UndoMismatchError propagates and the action stays on
        the history.
        """
        if not self._history:
            logger.debug("Nothing to undo")
            return
        action = self._history[-1]
        undo(action)
        self._history.pop()
        logger.debug(f"Undid {describe(action)} (history size {len(self._history)})")

    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def history(self) -> Tuple[Action, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)
