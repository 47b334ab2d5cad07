"""pytest設定とフィクスチャ"""

from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def web_client() -> AsyncMock:
    """AsyncWebClientの代わりになるモック"""
    return AsyncMock()
