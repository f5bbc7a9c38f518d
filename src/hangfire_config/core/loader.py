"""Load dashboard and server options from a configuration section path.

Usage::

    from hangfire_config import Configuration, get_server_options

    configuration = Configuration({"Hangfire:Server:WorkerCount": "4"})
    options = get_server_options(configuration)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from hangfire_config.config.defaults import (
    DEFAULT_DASHBOARD_SUB_SECTION_NAME,
    DEFAULT_SECTION_NAME,
    DEFAULT_SERVER_SUB_SECTION_NAME,
)
from hangfire_config.core.binder import bind
from hangfire_config.core.configuration import Configuration, join_path
from hangfire_config.core.options import DashboardOptions, ServerOptions
from hangfire_config.errors import InvalidArgumentError
from hangfire_config.utils.text_utils import is_blank, none_if_blank

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

BLANK_ARGUMENT_MESSAGE = "The specified string argument cannot be null, empty or whitespace."


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_dashboard_options(
    configuration: Configuration | Mapping[str, Any],
    section_name: str = DEFAULT_SECTION_NAME,
    sub_section_name: str = DEFAULT_DASHBOARD_SUB_SECTION_NAME,
) -> DashboardOptions:
    """Load dashboard options from ``<section_name>:<sub_section_name>``.

    A blank ``app_path`` is normalized to ``None``.
    """
    _require_configuration(configuration)
    _require_text(section_name, "section_name")
    _require_text(sub_section_name, "sub_section_name")

    result = load_options(DashboardOptions, configuration, [section_name, sub_section_name])

    result.app_path = none_if_blank(result.app_path)
    return result


def get_server_options(
    configuration: Configuration | Mapping[str, Any],
    section_name: str = DEFAULT_SECTION_NAME,
    sub_section_name: str = DEFAULT_SERVER_SUB_SECTION_NAME,
) -> ServerOptions:
    """Load background job server options from ``<section_name>:<sub_section_name>``.

    When more than one queue is configured the first (built-in default)
    entry is dropped. A blank ``server_name`` is normalized to ``None``.
    """
    _require_configuration(configuration)
    _require_text(section_name, "section_name")
    _require_text(sub_section_name, "sub_section_name")

    result = load_options(ServerOptions, configuration, [section_name, sub_section_name])

    if len(result.queues) > 1:
        result.queues = result.queues[1:]
    result.server_name = none_if_blank(result.server_name)
    return result


def load_options(
    factory: Callable[[], ModelT],
    configuration: Configuration | Mapping[str, Any],
    section_names: Sequence[str],
) -> ModelT:
    """Create an options object and bind the section reached by *section_names*.

    Descent stops at the first missing section; in that case the freshly
    constructed object is returned untouched.
    """
    _require_configuration(configuration)
    if section_names is None:
        raise InvalidArgumentError("section_names", "Value cannot be null.")
    if isinstance(section_names, str):
        raise InvalidArgumentError(
            "section_names", "Section names must be a sequence of names, not a string."
        )
    if len(section_names) == 0:
        raise InvalidArgumentError(
            "section_names", "At least one section name should be specified."
        )

    if not isinstance(configuration, Configuration):
        configuration = Configuration.from_mapping(configuration)

    result = factory()
    section: Configuration | None = configuration
    for name in section_names:
        section = section.get_section(name)
        if section is None:
            logger.debug(
                "Section %s not found; using defaults for %s",
                join_path(configuration.path, *section_names),
                type(result).__name__,
            )
            break

    if section is not None:
        bind(section, result)
    return result


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------


def _require_configuration(configuration: object) -> None:
    if configuration is None:
        raise InvalidArgumentError("configuration", "Value cannot be null.")
    if not isinstance(configuration, (Configuration, Mapping)):
        raise InvalidArgumentError(
            "configuration",
            f"Expected a Configuration or mapping, got {type(configuration).__name__}.",
        )


def _require_text(value: str | None, argument: str) -> None:
    if is_blank(value):
        raise InvalidArgumentError(argument, BLANK_ARGUMENT_MESSAGE)
