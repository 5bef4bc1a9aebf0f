"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML or JSON passed to :func:`load_config`
    3. Environment variables ``SENTENCE_FOCUS_DELIMITERS`` and
       ``SENTENCE_FOCUS_EXTRA_CHARACTERS``
"""

from .schema import ConfigModel, load_config, update_config

__all__ = ["ConfigModel", "load_config", "update_config"]
