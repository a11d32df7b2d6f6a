"""Site-wide search across every content collection."""

import logging

from .filters import text_matches
from .store import CONTENT_KINDS, get_store

logger = logging.getLogger(__name__)

SEARCH_FIELDS = {
    "scholarships": ("title", "description"),
    "articles": ("title", "content", "summary"),
    "countries": ("name", "description"),
    "universities": ("name", "description"),
    "news": ("title", "content", "summary"),
}


def search(query, stores=None):
    """
    Match ``query`` against all five collections.

    Returns a dict keyed by collection name. Each bucket keeps the store's
    order. Only an empty query returns every record; whitespace is part of
    the needle like any other character.
    """
    needle = query or ""
    if stores is None:
        stores = {kind: get_store(kind) for kind in CONTENT_KINDS}

    results = {}
    for kind in CONTENT_KINDS:
        records = stores[kind].list_all()
        if needle != "":
            records = [record for record in records if text_matches(record, needle, SEARCH_FIELDS[kind])]
        results[kind] = records

    logger.debug(
        "Search %r matched %s",
        needle,
        ", ".join(f"{kind}={len(records)}" for kind, records in results.items()),
    )
    return results
