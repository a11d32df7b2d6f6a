"""
Listing filters for the public catalog pages.

Filters run over the full in-memory collection returned by the store. Every
predicate is optional; ``None``, an empty string and ``"all"`` all mean
"match everything". Active predicates are AND-ed together and the input order
is preserved.
"""

ALL = "all"

# Fields scanned by the free-text box on each listing page.
LISTING_SEARCH_FIELDS = {
    "scholarships": ("title", "description"),
    "articles": ("title", "summary", "category"),
    "countries": ("name",),
    "universities": ("name", "description"),
    "news": ("title", "summary"),
}

EQUALITY_FILTERS = {
    "scholarships": ("country",),
    "articles": ("category",),
    "countries": (),
    "universities": ("country",),
    "news": ("category",),
}

TAG_FIELDS = {
    "scholarships": "tags",
}


def is_active(value):
    return value is not None and value.strip() not in ("", ALL)


def field_value(item, field):
    if isinstance(item, dict):
        return item.get(field)
    return getattr(item, field, None)


def text_matches(item, query, fields):
    """True if ``query`` is a case-insensitive substring of any of ``fields``."""
    needle = query.lower()
    for field in fields:
        value = field_value(item, field)
        if value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


def filter_items(items, kind, search=None, category=None, country=None, tag=None):
    if kind not in LISTING_SEARCH_FIELDS:
        raise ValueError(f"Unknown collection: {kind}")

    predicates = []

    if is_active(search):
        query = search.strip()
        fields = LISTING_SEARCH_FIELDS[kind]
        predicates.append(lambda item: text_matches(item, query, fields))

    for name, expected in (("category", category), ("country", country)):
        if not is_active(expected):
            continue
        if name not in EQUALITY_FILTERS[kind]:
            raise ValueError(f"{kind} cannot be filtered by {name}")
        predicates.append(lambda item, name=name, expected=expected: field_value(item, name) == expected)

    if is_active(tag):
        if kind not in TAG_FIELDS:
            raise ValueError(f"{kind} cannot be filtered by tag")
        tag_field = TAG_FIELDS[kind]
        predicates.append(lambda item: tag in (field_value(item, tag_field) or ()))

    return [item for item in items if all(predicate(item) for predicate in predicates)]


def distinct_values(items, field):
    """Unique values of ``field`` in first-seen order; list fields are flattened."""
    seen = []
    for item in items:
        value = field_value(item, field)
        values = value if isinstance(value, (list, tuple)) else [value]
        for entry in values:
            if entry in (None, "") or entry in seen:
                continue
            seen.append(entry)
    return seen


def split_featured(items):
    """Return ``(featured, regular)``, both in input order."""
    featured = [item for item in items if field_value(item, "is_featured")]
    regular = [item for item in items if not field_value(item, "is_featured")]
    return featured, regular
