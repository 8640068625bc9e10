# topmark:header:start
#
#   project      : OutFormat
#   file         : cli_types.py
#   file_relpath : src/outformat/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types used by the OutFormat commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Map a command-line token onto an `Enum` member by its (case-insensitive) value.

    The accepted spellings are the string values of the enum members, e.g.
    ``EnumChoiceParam(OutputFormat)`` accepts ``json``, ``JSON`` and ``Json``.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._members: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Canonical spellings, in declaration order."""
        return [str(m.value) for m in self.enum_cls]

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        if isinstance(value, self.enum_cls):
            return value
        member = self._members.get(str(value).strip().lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values, e.g. ``eval "$(_OUTFORMAT_COMPLETE=bash_source outformat)"``."""
        from click.shell_completion import CompletionItem

        needle = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(needle)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
