"""Common types and helpers shared across models."""

from typing import TypeAlias

UnixSeconds: TypeAlias = int
OffsetSeconds: TypeAlias = int

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Please try again."
