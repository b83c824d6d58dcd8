"""
Configuration schema and loader for the masonry montage tool.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support. CLI flags are
layered on top of a loaded file by :func:`build_config_from_cli`.
"""

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from masonry_montage.config_defaults import (
    DEFAULT_ASSUME_YES,
    DEFAULT_INPUT_DIR,
    DEFAULT_MAX_WIDTH,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PATTERNS,
    DEFAULT_SAVE_THUMBNAILS,
    DEFAULT_SORT_BY_WIDTH,
    DEFAULT_THUMBNAIL_HEIGHT,
    DEFAULT_THUMBNAILS_DIR,
)


class InputConfig(BaseModel):
    """Select where source images are discovered."""

    input_dir: str = Field(DEFAULT_INPUT_DIR)
    patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PATTERNS),
        min_length=1,
    )


class ThumbnailConfig(BaseModel):
    """Control thumbnail size and whether thumbnails are kept on disk."""

    height: int = Field(DEFAULT_THUMBNAIL_HEIGHT, gt=0)
    save: bool = DEFAULT_SAVE_THUMBNAILS
    directory: str = Field(DEFAULT_THUMBNAILS_DIR)
    assume_yes: bool = DEFAULT_ASSUME_YES


class LayoutConfig(BaseModel):
    """Control the masonry width budget and input ordering."""

    max_width: int = Field(DEFAULT_MAX_WIDTH, gt=0)
    sort_by_width: bool = DEFAULT_SORT_BY_WIDTH


class OutputConfig(BaseModel):
    """Configure the montage output file."""

    output: str = Field(DEFAULT_OUTPUT_FILE)


class MontageConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    # model_validate({}) lets Pydantic fill each section from its Field
    # defaults without a constructor call that omits required arguments.
    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )
    thumbnails: ThumbnailConfig = Field(
        default_factory=lambda: ThumbnailConfig.model_validate({}),
    )
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> MontageConfig:
        """
        Load a montage configuration from a TOML file.

        Returns a validated MontageConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return MontageConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field)
_CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "input": ("input", "input_dir"),
    "patterns": ("input", "patterns"),
    "height": ("thumbnails", "height"),
    "thumbnails_dir": ("thumbnails", "directory"),
    "maxwidth": ("layout", "max_width"),
    "output": ("output", "output"),
}


def _apply_flag_overrides(data: dict[str, Any], args: Mapping[str, Any]) -> None:
    """Apply boolean switches that only ever move away from defaults."""
    if args.get("no_thumbnails"):
        data["thumbnails"]["save"] = False
    if args.get("yes"):
        data["thumbnails"]["assume_yes"] = True
    if args.get("no_sort"):
        data["layout"]["sort_by_width"] = False


def build_config_from_cli(
    args: Mapping[str, Any],
    *,
    base_config: MontageConfig | None = None,
    loader: Callable[[str], MontageConfig] = ConfigLoader.load,
) -> MontageConfig:
    """
    Merge CLI arguments over a base configuration.

    When no ``base_config`` is supplied and ``args`` names a config file,
    it is loaded through ``loader``. Only arguments present in ``args``
    (and not None) override the base, so argparse options declared with
    ``default=argparse.SUPPRESS`` leave file values untouched. The merged
    result is validated again, raising pydantic's ``ValidationError`` on
    out-of-range values.
    """
    if base_config is None:
        config_path = args.get("config")
        base_config = (
            loader(config_path)
            if config_path
            else MontageConfig.model_validate({})
        )

    data = base_config.model_dump()
    for arg_name, (section, field) in _CLI_FIELD_MAP.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value
    _apply_flag_overrides(data, args)

    return MontageConfig.model_validate(data)
