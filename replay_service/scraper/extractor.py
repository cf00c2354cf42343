"""Replay link extraction: turns the replay page HTML into a JSON link list."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from replay_service.scraper.models import ReplayList

REPLAY_URL = "http://replay.pokemonshowdown.com"

# The page carries two ``.linklist`` elements: featured replays first, then
# the recent replays.  Only the second one is scraped.
LINK_LIST_SELECTOR = ".linklist"
TARGET_OCCURRENCE = 1
REPLAY_LINK_SELECTOR = "li > a"


def _replay_hrefs(html: str, target_occurrence: int) -> List[str]:
    """Return the raw ``href`` values of the replay anchors, in document order."""
    soup = BeautifulSoup(html, "html.parser")
    containers = soup.select(LINK_LIST_SELECTOR)
    if len(containers) <= target_occurrence:
        return []

    hrefs: List[str] = []
    for anchor in containers[target_occurrence].select(REPLAY_LINK_SELECTOR):
        href = anchor.get("href")
        if href is not None:
            hrefs.append(href)
    return hrefs


def extract_replays(
    html: str,
    base_url: str = REPLAY_URL,
    target_occurrence: int = TARGET_OCCURRENCE,
) -> ReplayList:
    """Extract the recent replay links from *html*.

    Each ``href`` is appended verbatim to *base_url*; anchors without one are
    skipped.  Markup without enough ``.linklist`` containers yields an empty
    list rather than an error.
    """
    hrefs = _replay_hrefs(html, target_occurrence)
    return ReplayList(replays=[base_url + href for href in hrefs])


def scrape_replays(html: str, base_url: str = REPLAY_URL) -> str:
    """Scrape *html* and return the replay links as a JSON string.

    Pure and CPU-bound, so it is safe to run on a worker thread.
    """
    return extract_replays(html, base_url=base_url).to_json()
