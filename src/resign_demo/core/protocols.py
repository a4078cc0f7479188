"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
terminal or console implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Quittable(Protocol):
    """Capability of being able to quit.

    Any object that implements :meth:`quit` satisfies this protocol
    structurally (no explicit inheritance required), so callers holding
    a ``Quittable`` reference never need to know the concrete type.
    """

    def quit(self) -> object:
        """Run the quitting flow for this object."""
        ...  # pragma: no cover


class Terminal(Protocol):
    """Contract for line-oriented user interaction.

    The core layer never prints; it talks to the user exclusively
    through an object satisfying this protocol.
    """

    def show(self, text: str = "") -> None:
        """Write *text* followed by a newline."""
        ...  # pragma: no cover

    def ask(self, prompt: str) -> str | None:
        """Write *prompt* without a newline and read one line of input.

        Returns ``None`` when input is exhausted (end of file).
        """
        ...  # pragma: no cover
