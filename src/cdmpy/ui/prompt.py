"""Interactive conflict policy backed by the terminal."""

# ruff: noqa: T201

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from cdmpy.domain.resolution import ConflictPolicy

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no"})


def prompt_policy(
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> ConflictPolicy:
    """Return a policy that asks, field by field, whether to adopt the new value."""

    def decide(diff: dict[str, tuple[str, str]]) -> dict[str, bool]:
        decisions: dict[str, bool] = {}
        for name, (current, incoming) in diff.items():
            write(f"Field {name} differs:")
            write(f"  current: {current}")
            write(f"  new:     {incoming}")
            while True:
                answer = read(f"Adopt new value for {name}? [y/n] ").strip().lower()
                if answer in _YES:
                    decisions[name] = True
                    break
                if answer in _NO:
                    decisions[name] = False
                    break
                write("Please answer y or n.")
        return decisions

    return decide
