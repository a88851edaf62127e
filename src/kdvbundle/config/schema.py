"""Typed configuration schema and loader for the kdvbundle package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, confloat, conint

CONFIG_ENV = "KDVBUNDLE_CONFIG"

Channel = Annotated[float, Field(ge=0.0, le=1.0)]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LayoutSettings(BaseModel):
    """Page geometry, fonts and colours used by the layout engine."""

    page_size: Literal["A4", "LETTER"]
    margin: confloat(gt=0.0)
    line_height: confloat(gt=0.0)
    font_name: str
    font_path: str | None = None
    body_size: confloat(gt=0.0)
    heading_size: confloat(gt=0.0)
    subsection_size: confloat(gt=0.0)
    text_color: tuple[Channel, Channel, Channel]
    heading_color: tuple[Channel, Channel, Channel]
    subtitle_color: tuple[Channel, Channel, Channel]
    right_column_ratio: confloat(gt=0.0, lt=1.0)

    model_config = ConfigDict(extra="forbid")


class DocumentSettings(BaseModel):
    """Fixed wording shared by the document builders."""

    recipient: list[str]
    subject: str
    signature_line: str
    empty_placeholder: str
    author: str

    model_config = ConfigDict(extra="forbid")


class PartFilenames(BaseModel):
    """File names of the three bundle parts, in bundle order."""

    cover_letter: str
    justification: str
    cv: str

    model_config = ConfigDict(extra="forbid")


class BundleSettings(BaseModel):
    """Bundle assembly behaviour."""

    filenames: PartFilenames
    bundle_filename: str
    parallel: bool = False

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    locale: str
    layout: LayoutSettings
    documents: DocumentSettings
    bundle: BundleSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML.  When
    ``path`` is ``None`` the ``KDVBUNDLE_CONFIG`` environment variable may name
    the override file instead.
    """

    with (
        importlib_resources.files("kdvbundle.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    environ = env if env is not None else os.environ
    if path is None and environ.get(CONFIG_ENV):
        path = environ[CONFIG_ENV]

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    return ConfigModel.model_validate(merged)


__all__ = [
    "CONFIG_ENV",
    "ConfigModel",
    "LayoutSettings",
    "DocumentSettings",
    "PartFilenames",
    "BundleSettings",
    "deep_merge_dicts",
    "load_config",
]
