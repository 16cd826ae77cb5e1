"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from javadoc_index.errors import ConfigurationError

CONFIG_ENV_VAR = "JAVADOC_INDEX_CONFIG"
DEFAULT_FILES_LIST_NAME = ".javadoc-index-files"
DEFAULT_INDEX_FILES_DIR = "index-files"
DEFAULT_VENDOR_SUBDIRECTORIES = ("org.eclipse.jgit",)
DEFAULT_MODULE_MARKER = "java.base"
DEFAULT_MODULE_PREFIXES = ("java.", "jdk.")
# "type parameter in " is left out: type parameters are not indexable symbols.
DEFAULT_TITLE_DESCRIPTORS = (
    "annotation in ",
    "annotation interface in ",
    "class in ",
    "class or interface in ",
    "enum in ",
    "enum class in ",
    "interface in ",
)

_KNOWN_SECTIONS = ("index", "layout", "extract")


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    """Directory conventions used to classify documentation roots."""

    index_files_dir: str
    vendor_subdirectories: tuple[str, ...]
    module_marker: str
    module_prefixes: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class ExtractConfig:
    """Markup extraction settings."""

    title_descriptors: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class ToolConfig:
    """Fully merged tool configuration."""

    files_list: Path
    layout: LayoutConfig
    extract: ExtractConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot for diagnostics."""
        return {
            "index": {"files_list": str(self.files_list)},
            "layout": {
                "index_files_dir": self.layout.index_files_dir,
                "vendor_subdirectories": list(self.layout.vendor_subdirectories),
                "module_marker": self.layout.module_marker,
                "module_prefixes": list(self.layout.module_prefixes),
            },
            "extract": {
                "title_descriptors": list(self.extract.title_descriptors),
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional command-line overrides applied at highest precedence."""

    files_list: Path | None = None


def default_config(home: Path | None = None) -> ToolConfig:
    """Build the default config, reading the list file from the user's home."""
    base = home if home is not None else Path.home()
    return ToolConfig(
        files_list=base / DEFAULT_FILES_LIST_NAME,
        layout=LayoutConfig(
            index_files_dir=DEFAULT_INDEX_FILES_DIR,
            vendor_subdirectories=DEFAULT_VENDOR_SUBDIRECTORIES,
            module_marker=DEFAULT_MODULE_MARKER,
            module_prefixes=DEFAULT_MODULE_PREFIXES,
        ),
        extract=ExtractConfig(title_descriptors=DEFAULT_TITLE_DESCRIPTORS),
    )


def load_config_file(config_path: Path) -> dict[str, object]:
    """Load a TOML settings file."""
    try:
        with config_path.open("rb") as handle:
            payload = tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(
            reason=f"Cannot read config file {config_path}: {exc.strerror}",
            hint="Check the --config path or the JAVADOC_INDEX_CONFIG variable.",
        ) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(
            reason=f"Config file {config_path} is not valid TOML: {exc}",
        ) from exc
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigurationError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(
                f"Config field '{section}.{field}' must contain only strings."
            )
        output.append(item)
    return tuple(output)


def _non_empty_string(value: object, section: str, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"Config field '{section}.{field}' must be a non-empty string.")
    return value


def merge_config(
    base: ToolConfig, file_payload: dict[str, object], overrides: CliOverrides
) -> ToolConfig:
    """Merge defaults, settings file, then command-line overrides."""
    unknown = sorted(key for key in file_payload if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(
            f"Unknown config section '{unknown[0]}'.",
            hint=f"Supported sections: {', '.join(_KNOWN_SECTIONS)}.",
        )
    index_payload = _get_table(file_payload, "index")
    layout_payload = _get_table(file_payload, "layout")
    extract_payload = _get_table(file_payload, "extract")

    files_list = base.files_list
    if "files_list" in index_payload:
        raw = _non_empty_string(index_payload["files_list"], "index", "files_list")
        files_list = Path(raw).expanduser()

    index_files_dir = base.layout.index_files_dir
    if "index_files_dir" in layout_payload:
        index_files_dir = _non_empty_string(
            layout_payload["index_files_dir"], "layout", "index_files_dir"
        )
    vendor_subdirectories = base.layout.vendor_subdirectories
    if "vendor_subdirectories" in layout_payload:
        vendor_subdirectories = _tuple_of_strings(
            layout_payload["vendor_subdirectories"], "layout", "vendor_subdirectories"
        )
    module_marker = base.layout.module_marker
    if "module_marker" in layout_payload:
        module_marker = _non_empty_string(layout_payload["module_marker"], "layout", "module_marker")
    module_prefixes = base.layout.module_prefixes
    if "module_prefixes" in layout_payload:
        module_prefixes = _tuple_of_strings(
            layout_payload["module_prefixes"], "layout", "module_prefixes"
        )

    title_descriptors = base.extract.title_descriptors
    if "title_descriptors" in extract_payload:
        title_descriptors = _tuple_of_strings(
            extract_payload["title_descriptors"], "extract", "title_descriptors"
        )

    merged = ToolConfig(
        files_list=files_list,
        layout=LayoutConfig(
            index_files_dir=index_files_dir,
            vendor_subdirectories=vendor_subdirectories,
            module_marker=module_marker,
            module_prefixes=module_prefixes,
        ),
        extract=ExtractConfig(title_descriptors=title_descriptors),
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: ToolConfig, overrides: CliOverrides) -> ToolConfig:
    """Apply command-line overrides at highest precedence."""
    if overrides.files_list is None:
        return config
    return ToolConfig(
        files_list=overrides.files_list,
        layout=config.layout,
        extract=config.extract,
    )


def load_effective_config(
    config_path: Path | None = None,
    overrides: CliOverrides | None = None,
    home: Path | None = None,
) -> ToolConfig:
    """Load effective config using merge order defaults -> settings file -> overrides."""
    base = default_config(home)
    if config_path is None:
        env_value = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_value:
            config_path = Path(env_value).expanduser()
    payload = load_config_file(config_path) if config_path is not None else {}
    return merge_config(base, payload, overrides or CliOverrides())
