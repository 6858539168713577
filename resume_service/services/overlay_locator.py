"""
Locate substrings inside a line of text so link zones and icons can be placed
on top of them.

The page writer does not expose glyph coordinates, so positions are derived
from the same string and the same font metrics used to draw it:

    x      = x0 + measure(line[:line.find(target)])
    width  = measure(target)

where x0 is where the whole line starts (for a centered line,
(page_width - measure(line)) / 2).
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional
from urllib.parse import quote_plus

logger = logging.getLogger(__name__)

Measure = Callable[[str], float]

# Contact line fields, matched independently over the whole line; first match wins
ADDRESS_PATTERN = re.compile(r"\d+[^|,@]*,[^|@]+?(?=\s*\||\s*$)")
EMAIL_PATTERN = re.compile(r"[^\s|]+@[^\s|]+\.[^\s|]+")
PHONE_PATTERN = re.compile(r"\+?\d{0,3}\s?\(\d{3}\)\s?\d{3}-\d{4}")
WEBSITE_PATTERN = re.compile(r"https?://[^\s|]+")

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="


@dataclass(frozen=True)
class Overlay:
    """Horizontal extent of a substring on its line."""
    x: float
    width: float

    @property
    def end(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class ContactOverlay:
    kind: str  # "address" | "email" | "phone" | "website"
    text: str
    target: str
    overlay: Overlay


def centered_origin(page_width: float, line_width: float) -> float:
    """Start x of a line centered on the page."""
    return (page_width - line_width) / 2


def locate_substring(line: str, target: str, x0: float, measure: Measure) -> Optional[Overlay]:
    """Position of the first occurrence of target in line, or None if absent."""
    if not target:
        return None
    index = line.find(target)
    if index < 0:
        return None
    prefix_width = measure(line[:index])
    return Overlay(x=x0 + prefix_width, width=measure(target))


def icon_x_after(overlay: Overlay, padding: float) -> float:
    """x of an icon placed right after the overlay."""
    return overlay.end + padding


def address_link(address: str, map_url: Optional[str] = None) -> str:
    return map_url or MAPS_SEARCH_URL + quote_plus(address)


def phone_link(phone: str) -> str:
    return "tel:" + re.sub(r"\D", "", phone)


def locate_contact_overlays(
    contact: str,
    x0: float,
    measure: Measure,
    map_url: Optional[str] = None,
) -> List[ContactOverlay]:
    """
    Link targets and positions for the address, email, phone and website in a
    contact line. Fields whose pattern does not match are skipped.
    """
    fields = []

    address = ADDRESS_PATTERN.search(contact)
    if address:
        text = address.group(0).strip()
        fields.append(("address", text, address_link(text, map_url)))

    email = EMAIL_PATTERN.search(contact)
    if email:
        fields.append(("email", email.group(0), f"mailto:{email.group(0)}"))

    phone = PHONE_PATTERN.search(contact)
    if phone:
        text = phone.group(0).strip()
        fields.append(("phone", text, phone_link(text)))

    website = WEBSITE_PATTERN.search(contact)
    if website:
        fields.append(("website", website.group(0), website.group(0)))

    overlays: List[ContactOverlay] = []
    for kind, text, target in fields:
        overlay = locate_substring(contact, text, x0, measure)
        if overlay is None:
            logger.debug(f"Contact {kind} '{text}' not found in line, skipping")
            continue
        overlays.append(ContactOverlay(kind=kind, text=text, target=target, overlay=overlay))

    found = {o.kind for o in overlays}
    for kind in ("address", "email", "phone", "website"):
        if kind not in found:
            logger.debug(f"No {kind} in contact line, no link added")
    return overlays
