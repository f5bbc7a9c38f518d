"""Bind a configuration section onto a pydantic model by field name."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

if TYPE_CHECKING:
    from hangfire_config.core.configuration import Configuration

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def bind(section: Configuration, target: ModelT) -> ModelT:
    """Populate *target* from the keys of *section* and return it.

    Keys match a field's alias or name case-insensitively. A value that
    fails validation is skipped and the field keeps what it had; keys with
    no matching field are ignored.
    """
    lookup = _field_lookup(type(target))

    for child in section.get_children():
        name = lookup.get(child.key.casefold())
        if name is None:
            logger.debug("No field for key %s on %s", child.path, type(target).__name__)
            continue

        current = getattr(target, name)
        if isinstance(current, BaseModel) and child.get_children():
            bind(child, current)
            continue

        raw = _raw_value(child)
        try:
            setattr(target, name, raw)
        except ValidationError as exc:
            logger.debug(
                "Ignoring value %r at %s: %s",
                raw,
                child.path,
                exc.errors()[0]["msg"],
            )
            continue
        logger.debug("Bound %s.%s from %s", type(target).__name__, name, child.path)

    return target


def _field_lookup(model_type: type[BaseModel]) -> dict[str, str]:
    """Map casefolded aliases and field names to field names."""
    lookup: dict[str, str] = {}
    for name, field in model_type.model_fields.items():
        lookup[name.casefold()] = name
        if field.alias:
            lookup[field.alias.casefold()] = name
    return lookup


def _raw_value(section: Configuration) -> Any:
    """Scalar text, a list for index-keyed children, or a dict otherwise."""
    children = section.get_children()
    if not children:
        return section.value
    if all(child.key.isdecimal() for child in children):
        return [_raw_value(child) for child in children]
    return {child.key: _raw_value(child) for child in children}
