"""Domain models for fin accounts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FinAccount:
    """Prepaid or gift certificate account.

    Attributes:
        account_id: Opaque account identifier.
        code: Uppercase alphanumeric code, also used as the PIN.
        account_type: Account type identifier (e.g. GIFTCERT_ACCOUNT).
        from_date: Start of the validity window.
        thru_date: Exclusive end of the validity window, if any.
    """

    account_id: str
    code: str | None
    account_type: str
    from_date: datetime | None = None
    thru_date: datetime | None = None

    def is_valid_at(self, moment: datetime) -> bool:
        """Return whether the validity window contains the given moment."""
        if self.from_date is not None and self.from_date > moment:
            return False
        if self.thru_date is not None and self.thru_date <= moment:
            return False
        return True


__all__ = ["FinAccount"]
