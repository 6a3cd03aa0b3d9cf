"""Fixed-point policy shared by every monetary computation."""

from dataclasses import dataclass
import decimal
from decimal import Decimal

_ROUNDING_MODES = frozenset(
    {
        decimal.ROUND_UP,
        decimal.ROUND_DOWN,
        decimal.ROUND_CEILING,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_05UP,
    }
)


@dataclass(frozen=True)
class DecimalPolicy:
    """Scale and rounding mode used for fin account amounts.

    Final results carry exactly ``scale`` fractional digits. Interim sums are
    kept at ``scale + 1`` digits and rounded once when they become a result.

    Attributes:
        decimals: Number of fractional digits in final results.
        rounding: ``decimal`` rounding constant (e.g. ``ROUND_HALF_EVEN``).
    """

    decimals: int = 2
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"Scale must not be negative: {self.decimals}")
        if self.rounding not in _ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.rounding}")

    @classmethod
    def from_names(cls, decimals: int, rounding_name: str) -> "DecimalPolicy":
        """Build a policy from a scale and a rounding mode name.

        Args:
            decimals: Number of fractional digits.
            rounding_name: Mode name such as ``HALF_UP`` or ``ROUND_HALF_UP``.

        Returns:
            DecimalPolicy: Configured policy.

        Raises:
            ValueError: If the rounding name is unknown.
        """
        name = rounding_name.strip().upper()
        if not name.startswith("ROUND_"):
            name = f"ROUND_{name}"
        if name not in _ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {rounding_name}")
        return cls(decimals=decimals, rounding=name)

    def scale(self) -> int:
        """Return the number of fractional digits of final results."""
        return self.decimals

    def rounding_mode(self) -> str:
        """Return the configured rounding constant."""
        return self.rounding

    @property
    def interim_scale(self) -> int:
        """Scale used while aggregating, one digit wider than results."""
        return self.decimals + 1

    def zero(self) -> Decimal:
        """Return the additive identity at the final scale."""
        return self.quantize(Decimal("0"))

    def quantize(self, value: Decimal, scale: int | None = None) -> Decimal:
        """Round a value to ``scale`` digits (final scale by default)."""
        digits = self.decimals if scale is None else scale
        return value.quantize(Decimal(1).scaleb(-digits), rounding=self.rounding)


__all__ = ["DecimalPolicy"]
