"""
Helpers for Django-backed record stores.

Store adapters wrap every ORM call in ``store_errors`` so that database
failures reach the services as ``StoreUnavailable`` instead of raw driver
exceptions.
"""

from contextlib import contextmanager
import logging

from django.db import DatabaseError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.domain.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str):
    """Translate database failures raised inside the block into StoreUnavailable."""
    try:
        yield
    except DatabaseError as exc:
        logger.error("Store operation %s failed: %s", operation, exc, exc_info=True)
        raise StoreUnavailable(operation) from exc


def lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset
