"""Utilities for launching and interacting with Playwright browsers."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from country_scraper import config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def with_browser(
    headless: Optional[bool] = None,
    executable_path: Optional[str] = None,
    args: Optional[Sequence[str]] = None,
) -> AsyncIterator[Browser]:
    """Async context manager yielding a configured Chromium browser instance.

    The browser is only closed if the launch succeeded; a failed launch
    propagates its error without any cleanup attempt on a missing handle.
    """
    async with async_playwright() as p:
        logger.info("Launching Browser")
        browser = await p.chromium.launch(
            headless=config.PLAYWRIGHT_HEADLESS if headless is None else headless,
            executable_path=executable_path,
            args=list(config.PLAYWRIGHT_LAUNCH_ARGS if args is None else args),
        )
        try:
            yield browser
        finally:
            await browser.close()
            logger.debug("Browser closed")


@asynccontextmanager
async def with_context(
    browser: Browser,
    *,
    user_agent: str | None = None,
    locale: str | None = None,
    viewport: dict | None = None,
) -> AsyncIterator[BrowserContext]:
    """Create a new browser context with project defaults applied."""
    context = await browser.new_context(
        user_agent=user_agent or config.PLAYWRIGHT_USER_AGENT,
        locale=locale or config.PLAYWRIGHT_LOCALE,
        viewport=viewport or config.PLAYWRIGHT_VIEWPORT,
    )
    try:
        yield context
    finally:
        await context.close()


async def new_page(context: BrowserContext) -> Page:
    """Open a new page with sensible defaults."""
    page = await context.new_page()
    page.set_default_timeout(config.PLAYWRIGHT_DEFAULT_TIMEOUT_MS)
    page.set_default_navigation_timeout(config.PLAYWRIGHT_NAVIGATION_TIMEOUT_MS)
    return page
