"""Customer entity, identified by email address."""

from __future__ import annotations

import re
from dataclasses import dataclass

from shop.domain.exceptions import InvalidFormatError

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


@dataclass(frozen=True)
class Customer:
    """A registered customer.

    ``name`` is free text; ``email`` must look like ``local@domain.tld``
    with a top-level domain of at least two letters.
    """

    name: str
    email: str

    def __post_init__(self) -> None:
        if not isinstance(self.email, str) or not EMAIL_PATTERN.fullmatch(self.email):
            raise InvalidFormatError("Invalid email format.")
