"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- processor: DataProcessor with a CDN host prefix
- rendering: JSS component rendering with nested items
- layout_data: Layout service payload with nested placeholders
- gql_item: GraphQL item with text, image and link fields
"""

import pytest

from jsskit.config.settings import get_settings
from jsskit.data.processor import DataProcessor

CDN_HOST = "https://cdn.example.com/"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def processor() -> DataProcessor:
    """Return a processor using the test CDN host."""
    return DataProcessor(host=CDN_HOST)


def text_field(value: str, field_type: str = "Single-Line Text") -> dict:
    """Build a JSS text field."""
    return {"fieldType": field_type, "value": value}


@pytest.fixture
def rendering() -> dict:
    """Return a JSS rendering with two levels of nested items.

    "Card" exists both as a direct child and as a grandchild under "Group".
    """
    return {
        "uid": "b5a5c3a1-0000-0000-0000-000000000001",
        "componentName": "CardList",
        "dataSource": "{A1B2C3D4-0000-0000-0000-000000000000}",
        "params": {},
        "fields": {
            "Heading": text_field("Our cards"),
            "items": [
                {
                    "name": "Group",
                    "displayName": "Group",
                    "fields": {
                        "Title": text_field("Group title"),
                        "items": [
                            {
                                "name": "Card",
                                "fields": {"Title": text_field("Nested card")},
                            },
                        ],
                    },
                },
                {
                    "name": "Card",
                    "displayName": "Card",
                    "fields": {
                        "Title": text_field("Direct card"),
                        "Body": text_field("<p>Hi</p>", "Rich Text"),
                    },
                },
            ],
        },
    }


@pytest.fixture
def layout_data(rendering) -> dict:
    """Return a layout service payload with a nested placeholder."""
    return {
        "sitecore": {
            "context": {"pageEditing": False, "language": "en"},
            "route": {
                "name": "home",
                "placeholders": {
                    "jss-main": [
                        {
                            "uid": "uid-header",
                            "componentName": "Header",
                            "dataSource": "{11111111-0000-0000-0000-000000000000}",
                            "placeholders": {
                                "jss-header-nav": [
                                    {
                                        "uid": "uid-nav",
                                        "componentName": "Navigation",
                                        "dataSource": "{22222222-0000-0000-0000-000000000000}",
                                    },
                                ],
                            },
                        },
                        rendering,
                    ],
                    "jss-footer": [
                        {
                            "uid": "uid-footer",
                            "componentName": "Footer",
                        },
                    ],
                },
            },
        },
    }


@pytest.fixture
def gql_item() -> dict:
    """Return a GraphQL item with one child."""
    return {
        "id": "A1B2C3D4",
        "name": "Home",
        "fields": [
            {
                "__typename": "TextField",
                "name": "Title",
                "value": "Welcome",
                "rendered": "Welcome",
            },
            {
                "__typename": "TextField",
                "name": "__Sortorder",
                "value": "100",
                "rendered": "100",
            },
            {
                "__typename": "ImageField",
                "name": "Hero",
                "value": '<image mediaid="{0000}" />',
                "rendered": '<img src="-/media/hero.jpg" alt="Hero" width="1200" height="600" />',
            },
            {
                "__typename": "LinkField",
                "name": "Cta",
                "value": (
                    '<link text="Learn" linktype="internal" url="/about" anchor="team" '
                    'querystring="" title="About" target="_blank" />'
                ),
                "rendered": '<a href="/about#team" title="About" target="_blank">Learn</a>',
            },
        ],
        "children": [
            {
                "id": "E5F6",
                "name": "Child",
                "fields": [
                    {
                        "__typename": "TextField",
                        "name": "Title",
                        "value": "Child title",
                        "rendered": "Child title",
                    },
                ],
            },
        ],
    }
