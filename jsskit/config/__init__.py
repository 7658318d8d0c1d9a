"""
Configuration Management.

Settings are loaded with Pydantic Settings from (in order of precedence):
1. Environment variables
2. .env file
3. Default values

Example:
    from jsskit.config import get_settings

    host = get_settings().jss_host
"""

from jsskit.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
