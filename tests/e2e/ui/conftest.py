"""
Pytest fixtures for the browser journey
One browser per session, a fresh context per test, a settle pause after each
"""

import asyncio
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import Page, expect

from petclinic_e2e.core import RestClient, FixtureSweeper
from petclinic_e2e.ui import BrowserSession, BrowserUnavailableError, NavigationBar, frontend_reachable


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_session(config) -> AsyncGenerator[BrowserSession, None]:
    """Launch the browser once; skip the journey when frontend or backend is down"""
    print(f"\n🌐 Verifying frontend at {config.ui_base_url}...")
    if not await frontend_reachable(config):
        pytest.skip(f"pet-clinic frontend not reachable at {config.ui_base_url}")

    async with RestClient(config) as client:
        if not await client.health_check():
            pytest.skip(f"pet-clinic backend not reachable at {config.api_base_url}")
        # Fixed journey names must be unique for link lookups
        report = await FixtureSweeper(client).sweep()
        print(f"🧹 Removed {len(report.deleted)} leftover journey records")

    session = BrowserSession(config)
    try:
        await session.start()
    except BrowserUnavailableError as e:
        pytest.skip(str(e))

    expect.set_options(timeout=config.ui_timeout * 1000)

    yield session
    await session.close()


@pytest_asyncio.fixture(loop_scope="session")
async def ui_page(browser_session, config) -> AsyncGenerator[Page, None]:
    page = await browser_session.new_page()
    yield page
    await browser_session.close_page(page)
    # Give the backend time to settle before the next journey step
    await asyncio.sleep(config.ui_settle_delay)


@pytest_asyncio.fixture(loop_scope="session")
async def navbar(ui_page) -> NavigationBar:
    return await NavigationBar(ui_page).open_home()
