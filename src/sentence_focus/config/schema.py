"""Typed configuration schema and loader for the sentence_focus package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, conint

from sentence_focus.core.models import SentenceConfig
from sentence_focus.utils.logging import get_logger

logger = get_logger(__name__)

ENV_DELIMITERS = "SENTENCE_FOCUS_DELIMITERS"
ENV_EXTRA_CHARACTERS = "SENTENCE_FOCUS_EXTRA_CHARACTERS"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SentenceSettings(BaseModel):
    """Raw character settings as stored by the host.

    ``titles`` may be a newline separated string or a list of strings.  Each
    title is expected to end with one of ``sentence_delimiters``; this is not
    validated and a title that does not simply never suppresses a boundary.
    """

    sentence_delimiters: str = Field(
        validation_alias=AliasChoices("sentence_delimiters", "sentenceDelimiters")
    )
    extra_characters: str = Field(
        validation_alias=AliasChoices("extra_characters", "extraCharacters")
    )
    titles: str | list[str] = ""

    model_config = ConfigDict(extra="forbid", frozen=True)


class HighlightSettings(BaseModel):
    """Display behaviour of the focus session."""

    reset_on_scroll: bool

    model_config = ConfigDict(extra="forbid", frozen=True)


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    sentence: SentenceSettings
    highlight: HighlightSettings

    model_config = ConfigDict(extra="forbid", frozen=True)

    def sentence_config(self) -> SentenceConfig:
        """Compile the raw sentence settings into a :class:`SentenceConfig`."""

        s = self.sentence
        return SentenceConfig.from_strings(s.sentence_delimiters, s.extra_characters, s.titles)


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


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    sentence: dict[str, Any] = {}
    if ENV_DELIMITERS in environ:
        sentence["sentence_delimiters"] = environ[ENV_DELIMITERS]
    if ENV_EXTRA_CHARACTERS in environ:
        sentence["extra_characters"] = environ[ENV_EXTRA_CHARACTERS]
    return {"sentence": sentence} if sentence else {}


_HOST_KEYS = {
    "sentenceDelimiters": "sentence_delimiters",
    "extraCharacters": "extra_characters",
    "titles": "titles",
}


def _normalise_aliases(data: dict[str, Any]) -> dict[str, Any]:
    """Map host settings onto the ``sentence`` section with snake_case keys.

    The host stores its settings flat (``{"sentenceDelimiters": ...}``); those
    top-level keys are moved under ``sentence`` before merging.
    """

    flat = {key: data[key] for key in _HOST_KEYS if key in data}
    rest = {key: value for key, value in data.items() if key not in _HOST_KEYS}
    sentence = rest.get("sentence", {})
    if not isinstance(sentence, dict):
        return data
    merged = {**sentence, **flat}
    renamed = {_HOST_KEYS.get(key, key): value for key, value in merged.items()}
    if not renamed:
        return rest
    return {**rest, "sentence": renamed}


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML (JSON
    is accepted as well) < environment variables.
    """

    with (
        importlib_resources.files("sentence_focus.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        logger.debug("loaded config overrides from %s", path)
        merged = deep_merge_dicts(defaults, _normalise_aliases(overrides))
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, _env_overrides(environ))

    return ConfigModel.model_validate(merged)


def update_config(cfg: ConfigModel, **sentence_changes: Any) -> ConfigModel:
    """Return a new validated config with ``sentence_changes`` applied.

    Keys are :class:`SentenceSettings` field names.  ``cfg`` is left untouched.
    """

    data = cfg.model_dump()
    data["sentence"] = {**data["sentence"], **sentence_changes}
    return ConfigModel.model_validate(data)


__all__ = [
    "ConfigModel",
    "SentenceSettings",
    "HighlightSettings",
    "ENV_DELIMITERS",
    "ENV_EXTRA_CHARACTERS",
    "deep_merge_dicts",
    "load_config",
    "update_config",
]
