"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`, or named by
       the ``KDVBUNDLE_CONFIG`` environment variable when no path is given
"""

from .schema import ConfigModel, load_config

__all__ = ["ConfigModel", "load_config"]
