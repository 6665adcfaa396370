# topmark:header:start
#
#   project      : DocSniff
#   file         : model.py
#   file_relpath : src/docsniff/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot that builds the runtime `Sniffer`.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.docsniff]`` in ``pyproject.toml`` (working directory)
    3) ``docsniff.toml`` (working directory)
    4) Extra config files passed explicitly via ``--config`` (in the order provided)
    5) CLI overrides (`MutableConfig.apply_cli_args`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docsniff.config.io import (
    extract_docsniff_table,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from docsniff.config.keys import Toml
from docsniff.config.logging import get_logger
from docsniff.config.types import SniffStrategy
from docsniff.constants import (
    DEFAULT_PREFIX_SIZE,
    DOCSNIFF_TOML_NAME,
    MIN_PREFIX_SIZE,
    PYPROJECT_TOML_NAME,
)
from docsniff.errors import ConfigError, ExtensionTableError
from docsniff.formats.extensions import BUILTIN_EXTENSIONS, ExtensionEntry, ExtensionTable
from docsniff.formats.kinds import FileKind
from docsniff.sniff import Sniffer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docsniff.config.logging import DocsniffLogger
    from docsniff.config.types import ArgsLike, TomlTable

logger: DocsniffLogger = get_logger(__name__)

# Marker recorded in `config_files` when CLI overrides are applied
CLI_OVERRIDE_STR = "<CLI overrides>"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        prefix_size (int): Bytes read from the head of a file for content sniffing.
        strategy (SniffStrategy): Default classification strategy.
        extra_extensions (tuple[tuple[str, FileKind], ...]): Additional
            ``(suffix, kind)`` pairs, matched before the built-in suffix table.
        config_files (tuple[str, ...]): Provenance of the merged layers.
    """

    prefix_size: int
    strategy: SniffStrategy
    extra_extensions: tuple[tuple[str, FileKind], ...]
    config_files: tuple[str, ...]

    def build_sniffer(self) -> Sniffer:
        """Build a `Sniffer` honouring this configuration.

        Returns:
            Sniffer: A sniffer using ``prefix_size`` and the extended suffix table.

        Raises:
            ConfigError: If the extra suffixes make the suffix table inconsistent.
        """
        if not self.extra_extensions:
            return Sniffer(prefix_size=self.prefix_size)
        table: ExtensionTable = BUILTIN_EXTENSIONS.with_overrides(
            ExtensionEntry(suffix, kind) for suffix, kind in self.extra_extensions
        )
        try:
            table.verify()
        except ExtensionTableError as e:
            raise ConfigError(f"Invalid [extensions] configuration: {e}") from e
        return Sniffer(prefix_size=self.prefix_size, extensions=table)

    def to_toml_dict(self) -> TomlTable:
        """Render this configuration as a ``docsniff.toml``-shaped dict."""
        return {
            Toml.KEY_PREFIX_SIZE: self.prefix_size,
            Toml.KEY_STRATEGY: self.strategy.name.lower(),
            Toml.SECTION_EXTENSIONS: {s: k.name.lower() for s, k in self.extra_extensions},
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            prefix_size=self.prefix_size,
            strategy=self.strategy,
            extra_extensions=dict(self.extra_extensions),
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left as ``None`` are "not set" and fall through to lower layers when
    merging; `freeze` substitutes the built-in defaults for them.
    """

    prefix_size: int | None = None
    strategy: SniffStrategy | None = None
    extra_extensions: dict[str, FileKind] = field(default_factory=lambda: {})
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Raises:
            ConfigError: If ``prefix_size`` is below the supported minimum.
        """
        prefix_size: int = DEFAULT_PREFIX_SIZE if self.prefix_size is None else self.prefix_size
        if prefix_size < MIN_PREFIX_SIZE:
            raise ConfigError(
                f"prefix_size must be at least {MIN_PREFIX_SIZE} bytes (got {prefix_size})"
            )
        return Config(
            prefix_size=prefix_size,
            strategy=self.strategy or SniffStrategy.GUESS,
            extra_extensions=tuple(self.extra_extensions.items()),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(prefix_size=DEFAULT_PREFIX_SIZE, strategy=SniffStrategy.GUESS)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed DocSniff table.

        Args:
            data (TomlTable): The ``docsniff.toml`` document or ``[tool.docsniff]`` table.
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigError: If a value has the wrong type, an unknown strategy or kind
                name is used, or a suffix does not start with ``.``.
        """
        where: str = str(config_file) if config_file else "<config>"
        draft: MutableConfig = cls()
        if config_file is not None:
            draft.config_files = [str(config_file)]

        if Toml.KEY_PREFIX_SIZE in data:
            draft.prefix_size = get_int_value_or_none(data, Toml.KEY_PREFIX_SIZE)
            if draft.prefix_size is None:
                raise ConfigError(f"{where}: '{Toml.KEY_PREFIX_SIZE}' must be an integer")

        if Toml.KEY_STRATEGY in data:
            raw_strategy: str | None = get_string_value_or_none(data, Toml.KEY_STRATEGY)
            draft.strategy = SniffStrategy.from_name(raw_strategy)
            if draft.strategy is None:
                choices: str = ", ".join(m.name.lower() for m in SniffStrategy)
                raise ConfigError(
                    f"{where}: invalid '{Toml.KEY_STRATEGY}' {data[Toml.KEY_STRATEGY]!r} "
                    f"(expected one of: {choices})"
                )

        ext_tbl: TomlTable = get_table_value(data, Toml.SECTION_EXTENSIONS)
        logger.trace("TOML [%s]: %s", Toml.SECTION_EXTENSIONS, ext_tbl)
        for suffix, raw_kind in ext_tbl.items():
            draft.extra_extensions[_parse_suffix(suffix, where)] = _parse_kind(raw_kind, where)

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``docsniff.toml`` and ``pyproject.toml`` (``[tool.docsniff]``).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None for a ``pyproject.toml``
                without a ``[tool.docsniff]`` section.

        Raises:
            ConfigError: If the file cannot be read, parsed, or validated.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable | None = extract_docsniff_table(path, load_toml_dict(path))
        if data is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return the config files present in ``start``, lowest precedence first.

        ``pyproject.toml`` comes before ``docsniff.toml`` so that a later merge
        gives precedence to the dedicated file.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, DOCSNIFF_TOML_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", start, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            cwd (Path | None): Directory searched for project config files
                (defaults to the current working directory).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip project config discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.

        Raises:
            ConfigError: If any config file is unreadable or invalid.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(cwd or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            extra_path = Path(extra)
            if not extra_path.is_file():
                raise ConfigError(f"Config file not found: {extra_path}")
            mc = cls.from_toml_file(extra_path)
            if mc is None:
                logger.warning("No [tool.docsniff] section in %s; ignoring it", extra_path)
                continue
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Extra extensions are merged key-wise; a suffix redefined by ``other``
        takes its kind from ``other``.
        """
        extra: dict[str, FileKind] = dict(self.extra_extensions)
        extra.update(other.extra_extensions)
        return MutableConfig(
            prefix_size=other.prefix_size if other.prefix_size is not None else self.prefix_size,
            strategy=other.strategy if other.strategy is not None else self.strategy,
            extra_extensions=extra,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Recognized keys: ``prefix_size`` and ``strategy``; a ``None`` value means
        "not given" and leaves the current value untouched.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This instance, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        prefix_size: int | None = args.get("prefix_size")
        if prefix_size is not None:
            self.prefix_size = prefix_size

        strategy: Any = args.get("strategy")
        if isinstance(strategy, SniffStrategy):
            self.strategy = strategy
        elif isinstance(strategy, str):
            self.strategy = SniffStrategy.from_name(strategy)
            if self.strategy is None:
                raise ConfigError(f"Invalid strategy: {strategy!r}")

        return self


def _parse_suffix(suffix: str, where: str) -> str:
    if not suffix.startswith(".") or len(suffix) < 2:
        raise ConfigError(f"{where}: extension {suffix!r} must start with '.'")
    return suffix.lower()


def _parse_kind(raw_kind: Any, where: str) -> FileKind:
    kind: FileKind | None = FileKind.from_name(raw_kind) if isinstance(raw_kind, str) else None
    if kind is None:
        raise ConfigError(f"{where}: unknown file kind {raw_kind!r}")
    return kind
