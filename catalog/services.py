"""
Admin CRUD over the content collections.

Reads are public. Every mutation takes an explicit ``AdminSession`` and
checks it before the store is touched; payloads go through the collection's
serializer and nothing is written unless validation passes.
"""

import logging

from .auth import require_admin
from .exceptions import NotFound, ValidationError
from .serializers import SERIALIZERS
from .store import get_store, normalize_identifier, normalize_payload

logger = logging.getLogger(__name__)


class ContentService:
    def __init__(self, kind, store=None, serializer_class=None):
        self.kind = kind
        self.store = store if store is not None else get_store(kind)
        self.serializer_class = serializer_class or SERIALIZERS[kind]

    def list(self):
        return self.store.list_all()

    def get(self, identifier):
        """Look a record up by slug, falling back to its id."""
        try:
            return self.store.get_by_slug(identifier)
        except NotFound:
            if not str(identifier).strip().isdigit():
                raise
        return self.store.get_by_id(identifier)

    def _validated(self, payload, instance=None, partial=False):
        data = normalize_payload(payload)
        data.pop("id", None)
        serializer = self.serializer_class(instance, data=data, partial=partial)
        if not serializer.is_valid():
            raise ValidationError(serializer.errors)
        return serializer.validated_data

    def create(self, session, payload):
        require_admin(session)
        values = self._validated(payload)
        record = self.store.insert(values)
        logger.info("%s created %s id=%s", session.username, self.kind, record.pk)
        return record

    def update(self, session, identifier, payload, partial=False):
        require_admin(session)
        payload_id = normalize_payload(payload).get("id")
        if payload_id not in (None, "") and str(payload_id) != str(identifier):
            raise ValidationError({"id": ["Does not match the record being updated."]})

        instance = self.store.get_by_id(identifier)
        values = self._validated(payload, instance=instance, partial=partial)
        record = self.store.replace(instance.pk, values)
        logger.info("%s updated %s id=%s", session.username, self.kind, record.pk)
        return record

    def delete(self, session, identifier):
        require_admin(session)
        pk = normalize_identifier(identifier)
        self.store.remove(pk)
        logger.info("%s deleted %s id=%s", session.username, self.kind, pk)
        return True


def get_service(kind):
    if kind not in SERIALIZERS:
        raise NotFound(f"Unknown collection: {kind}")
    return ContentService(kind)
