# SPDX-License-Identifier: Apache-2.0
"""Configuration management for ibexparser."""

from .loader import ConfigVersionError, apply_overrides, load_config
from .settings import CURRENT_CONFIG_VERSION, MIN_SUPPORTED_VERSION, ParserSettings

__all__ = [
    "ParserSettings",
    "CURRENT_CONFIG_VERSION",
    "MIN_SUPPORTED_VERSION",
    "load_config",
    "apply_overrides",
    "ConfigVersionError",
]
