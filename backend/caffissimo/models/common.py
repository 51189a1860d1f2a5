"""Shared field types for the value records."""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from caffissimo.utils.timezone_helpers import as_naive_utc

# Timestamps are stored as naive UTC; ISO strings with "Z" are normalised.
UtcDateTime = Annotated[datetime, AfterValidator(as_naive_utc)]
