"""Cache key value object."""

from dataclasses import dataclass
from decimal import Context, Decimal

ANY = "any"


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    A key is a literal tag followed by ordered parts, rendered as
    ``tag-part1-part2``. Two keys are equal exactly when their rendered
    strings are equal.
    """

    tag: str
    parts: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return the full cache key string."""
        return "-".join((self.tag, *self.parts))

    @staticmethod
    def render(value: int | Decimal | None) -> str:
        """Render one optional key component.

        Absent values render as ``any``. Decimals are rendered in their
        shortest exact form, so numerically equal bounds (``100``,
        ``100.00``, ``-0``, ``0``) render identically and unequal ones
        never do, whatever their precision.
        """
        if value is None:
            return ANY
        if isinstance(value, Decimal):
            if value.is_zero():
                return "0"
            # Precision wide enough to keep every digit, so nothing rounds
            exact = Context(prec=max(1, len(value.as_tuple().digits)))
            return format(value.normalize(exact), "f")
        return str(value)
