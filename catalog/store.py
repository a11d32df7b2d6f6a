"""
Content store: one ``CollectionStore`` per collection, backed by the Django ORM.

The store is the only place that talks to the database. It hides two storage
details from the rest of the app: database failures surface as
``StoreUnavailable`` and identifiers are normalized to the integer ``id``
(payloads exported from the old document store carry ``_id`` instead).
"""

import logging
from collections.abc import Mapping
from contextlib import contextmanager

from django.db import DatabaseError, IntegrityError, transaction

from .exceptions import NotFound, StoreUnavailable, ValidationError
from .models import Article, Country, MenuItem, News, Scholarship, University

logger = logging.getLogger(__name__)

# Collections exposed to search and listing pages, in response order.
CONTENT_KINDS = ("scholarships", "articles", "countries", "universities", "news")

COLLECTIONS = {
    "scholarships": Scholarship,
    "articles": Article,
    "countries": Country,
    "universities": University,
    "news": News,
    "menu": MenuItem,
}


@contextmanager
def store_guard(action, name):
    try:
        yield
    except IntegrityError as exc:
        logger.warning("Integrity error while trying to %s %s: %s", action, name, exc)
        raise ValidationError({"non_field_errors": [f"Could not {action} {name}: {exc}"]}) from exc
    except DatabaseError as exc:
        logger.error("Store failure while trying to %s %s: %s", action, name, exc)
        raise StoreUnavailable() from exc


def normalize_identifier(value):
    """Return the integer primary key for ``value`` or raise ``NotFound``."""
    if isinstance(value, bool):
        raise NotFound(f"Invalid identifier: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise NotFound(f"Invalid identifier: {value!r}")


def normalize_payload(payload):
    """Copy ``payload`` folding a legacy ``_id`` key into ``id``."""
    if not isinstance(payload, Mapping):
        raise ValidationError({"non_field_errors": ["Expected a JSON object."]})
    data = dict(payload)
    legacy_id = data.pop("_id", None)
    if legacy_id is not None and data.get("id") in (None, ""):
        data["id"] = legacy_id
    return data


class CollectionStore:
    def __init__(self, model, slug_field="slug"):
        self.model = model
        self.slug_field = slug_field if slug_field in {f.name for f in model._meta.get_fields()} else None

    @property
    def label(self):
        return self.model._meta.verbose_name.capitalize()

    def _not_found(self):
        return NotFound(f"{self.label} not found")

    def list_all(self):
        with store_guard("list", self.model._meta.verbose_name_plural):
            return list(self.model.objects.all())

    def get_by_slug(self, slug):
        if self.slug_field is None:
            raise self._not_found()
        with store_guard("read", self.model._meta.verbose_name):
            try:
                return self.model.objects.get(**{self.slug_field: slug})
            except self.model.DoesNotExist:
                raise self._not_found()

    def get_by_id(self, identifier):
        pk = normalize_identifier(identifier)
        with store_guard("read", self.model._meta.verbose_name):
            try:
                return self.model.objects.get(pk=pk)
            except self.model.DoesNotExist:
                raise self._not_found()

    def insert(self, values):
        with store_guard("create", self.model._meta.verbose_name), transaction.atomic():
            return self.model.objects.create(**values)

    def replace(self, identifier, values):
        instance = self.get_by_id(identifier)
        for field, value in values.items():
            setattr(instance, field, value)
        with store_guard("update", self.model._meta.verbose_name), transaction.atomic():
            instance.save()
        return instance

    def remove(self, identifier):
        pk = normalize_identifier(identifier)
        with store_guard("delete", self.model._meta.verbose_name):
            deleted, _ = self.model.objects.filter(pk=pk).delete()
        if not deleted:
            raise self._not_found()
        return True


def get_store(kind):
    try:
        model = COLLECTIONS[kind]
    except KeyError:
        raise NotFound(f"Unknown collection: {kind}")
    return CollectionStore(model)
