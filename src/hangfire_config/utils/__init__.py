"""Utility functions for text and duration shaping."""

from hangfire_config.utils.text_utils import is_blank, none_if_blank, split_csv
from hangfire_config.utils.time_utils import parse_timespan

__all__ = [
    "is_blank",
    "none_if_blank",
    "parse_timespan",
    "split_csv",
]
