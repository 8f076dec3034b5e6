"""Meteogram image lookup in CPTEC forecast pages.

The forecast page embeds the chart as an ``<img>`` somewhere below
``<div id="meteograma">``. This coupling to the site's markup is the part most
likely to break; the saved pages in ``tests/fixtures`` document the structure
this module expects.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

METEOGRAM_CONTAINER_ID = "meteograma"


def locate_meteogram_url(html: str) -> Optional[str]:
    """
    Extract the meteogram image URL from a forecast page.

    Args:
        html: Page markup. Malformed HTML is tolerated.

    Returns:
        The ``src`` of the first ``<img>`` inside the first
        ``<div id="meteograma">``, as written in the page (possibly relative),
        or None if the container, the image or its ``src`` is missing.
    """
    soup = BeautifulSoup(html, "html.parser")

    container = soup.find("div", id=METEOGRAM_CONTAINER_ID)
    if container is None:
        logger.debug(f"No div#{METEOGRAM_CONTAINER_ID} in page")
        return None

    img = container.find("img")
    if img is None:
        logger.debug(f"div#{METEOGRAM_CONTAINER_ID} has no image")
        return None

    src = (img.get("src") or "").strip()
    return src or None
