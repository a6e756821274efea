"""DOM-based extraction of the page title and country headings."""

from __future__ import annotations

import logging

from playwright.async_api import Page

from country_scraper import config
from country_scraper.scraper import playwright_driver
from country_scraper.scraper.models import ScrapedData

logger = logging.getLogger(__name__)

# Runs inside the page. Errors stay in the browser console and surface as null.
EXTRACT_SCRIPT = """
() => {
    try {
        const heading = document.getElementsByTagName('h1')[0];
        const countryNames = [];
        for (const country of document.getElementsByTagName('h3')) {
            countryNames.push(country.innerText);
        }
        return { title: heading.innerText, countryNames };
    } catch (error) {
        console.log('ERROR: ', error);
        return null;
    }
}
"""


async def goto_entry(page: Page, url: str) -> None:
    """Navigate to ``url`` and wait until the network has gone idle."""
    logger.info("Opening: %s", url)
    await page.goto(url, wait_until="networkidle")


async def extract_countries(page: Page) -> ScrapedData:
    """Evaluate the extraction script on the current page."""
    payload = await page.evaluate(EXTRACT_SCRIPT)
    return ScrapedData.from_browser_payload(payload)


async def scrape_countries(job_config: config.JobConfig) -> ScrapedData:
    """Launch a browser, load the entry page and return its scraped data."""
    async with playwright_driver.with_browser(
        executable_path=job_config.browser_executable_path,
    ) as browser:
        async with playwright_driver.with_context(browser) as context:
            page = await playwright_driver.new_page(context)
            await goto_entry(page, job_config.entry_url)
            data = await extract_countries(page)

    logger.info(
        "Scraped Data: title=%r, %d countries",
        data.title,
        len(data.country_names),
    )
    logger.debug("Country names: %s", data.country_names)
    return data
