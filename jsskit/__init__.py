"""
jss-kit - Sitecore JSS data normalization toolkit.

This package contains the modules used to turn Sitecore content data into a
single canonical tree shape:
- data: content type model, DataProcessor, markup extraction and tree lookup
- services: SitecoreDataService facade over layout and GraphQL data
- transport: async GraphQL client used to fetch items
- config: Pydantic settings and configuration
- core: exception hierarchy and logging setup
"""

__version__ = "0.1.0"
