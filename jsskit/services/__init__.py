"""Data-access services."""

from jsskit.services.sitecore_data import SitecoreDataService

__all__ = [
    "SitecoreDataService",
]
