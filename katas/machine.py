"""A machine that learns which action belongs to which command."""

from __future__ import annotations

from collections.abc import Callable


def _half(x: int) -> int:
    """Halve, truncating toward zero."""
    return -((-x) // 2) if x < 0 else x // 2


def _parity(x: int) -> int:
    """Remainder of division by two, taking the sign of ``x``."""
    return x - 2 * _half(x)


_ACTIONS: tuple[Callable[[int], int], ...] = (
    lambda x: x + 1,
    lambda x: 0,
    _half,
    lambda x: x * 100,
    _parity,
)


def actions() -> list[Callable[[int], int]]:
    """The actions the machine can choose between, in order."""
    return list(_ACTIONS)


class Machine:
    """Maps commands to actions, moving on to the next action after a wrong answer."""

    def __init__(self) -> None:
        self._cmd = 0
        self._mapping: dict[int, int] = {}

    def command(self, cmd: int, num: int) -> int:
        """Apply the action currently mapped to ``cmd`` to ``num``."""
        self._cmd = cmd
        return _ACTIONS[self._mapping.get(cmd, 0)](num)

    def response(self, res: bool) -> None:
        """Feedback on the last command; a wrong answer selects the next action."""
        if not res:
            self._mapping[self._cmd] = (self._mapping.get(self._cmd, 0) + 1) % len(_ACTIONS)