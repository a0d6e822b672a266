from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    """Postal address attached to a customer.

    No invariants are enforced here. Region and country may be absent;
    validators and formatters are responsible for handling that.
    """

    line1: str | None = None
    city: str | None = None
    region: str | None = None  # state / province
    postal_code: str | None = None
    country_code: str | None = None  # e.g. "US"
