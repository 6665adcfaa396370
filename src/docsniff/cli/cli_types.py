# topmark:header:start
#
#   project      : DocSniff
#   file         : cli_types.py
#   file_relpath : src/docsniff/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Shared CLI parameter types for DocSniff.

Defines the `ArgsNamespace` TypedDict handed from Click commands to the config
layer, and `EnumChoiceParam`, a Click parameter type for Enum-valued options.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypedDict, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    from docsniff.config.types import SniffStrategy

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class ArgsNamespace(TypedDict, total=False):
    """Parsed CLI arguments relevant to configuration resolution.

    Attributes:
        no_config (bool | None): Whether to ignore project config files.
        config_files (list[str] | None): Extra config file paths.
        prefix_size (int | None): Override for the content sniffing window.
        strategy (SniffStrategy | None): Override for the classification strategy.
    """

    no_config: bool | None
    config_files: list[str] | None
    prefix_size: int | None
    strategy: SniffStrategy | None


def build_args_namespace(
    *,
    no_config: bool | None = None,
    config_files: list[str] | None = None,
    prefix_size: int | None = None,
    strategy: SniffStrategy | None = None,
) -> ArgsNamespace:
    """Build an `ArgsNamespace` dictionary for CLI argument passing."""
    return {
        "no_config": no_config,
        "config_files": config_files,
        "prefix_size": prefix_size,
        "strategy": strategy,
    }


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a member name to a member of a given Enum.

    Matching is case-insensitive on the member *name*, so enums whose values are
    descriptions (like `SniffStrategy`) get short command-line spellings.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [m.name.lower() for m in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a member name to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.enum_cls.__members__.get(str(value).upper())
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_DOCSNIFF_COMPLETE=bash_source docsniff)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
