"""
Coworker roster rules.
"""
import logging
from dataclasses import replace

from .shifts import ValidationError

logger = logging.getLogger(__name__)


def validate_coworker(coworker):
    if not (coworker.id and coworker.name and coworker.first_name and coworker.last_name):
        raise ValidationError("Please fill in all required fields.")
    if not coworker.positions:
        raise ValidationError("Please select at least one position.")


def find_user(coworkers):
    return next((c for c in coworkers if c.is_user), None)


def save_coworker(store, coworker, is_new=False):
    """
    Validate and write a coworker.

    Only one coworker can be the user: when this one is, whoever held the
    flag before is written back without it first.
    """
    validate_coworker(coworker)

    if coworker.is_user:
        current = next((c for c in store.get_coworkers() if c.is_user and c.id != coworker.id), None)
        if current is not None:
            logger.info("Moving user flag from %s to %s", current.id, coworker.id)
            store.update_coworker(replace(current, is_user=False))

    if is_new:
        return store.add_coworker(coworker)
    return store.update_coworker(coworker)


def set_user(store, coworker_id):
    coworker = next((c for c in store.get_coworkers() if c.id == coworker_id), None)
    if coworker is None:
        raise ValidationError(f"No coworker with ID {coworker_id}.")
    return save_coworker(store, replace(coworker, is_user=True))
