"""
trello-mcp validation module.

This module provides configuration loading and credential checks.
"""

from trello_mcp.validation.config import Config, ConfigError, Credentials, MissingCredentialsError

__all__ = ["Config", "ConfigError", "Credentials", "MissingCredentialsError"]
