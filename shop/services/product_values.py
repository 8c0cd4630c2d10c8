"""Product dropdown option values.

A product dropdown option is either a whole product (``"12"``) or one priced
variant of a product (``"12_3"``: product 12, price option index 3).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

SEPARATOR = "_"


@dataclass(frozen=True)
class ProductValue:
    product_id: int
    price_id: Optional[int] = None

    @property
    def has_price(self) -> bool:
        return self.price_id is not None

    @classmethod
    def parse(cls, value: Any) -> Optional["ProductValue"]:
        """Return the value encoded in ``value`` or ``None`` if it is not one.

        Accepts integers, ``"<product>"`` and ``"<product>_<price>"`` strings.
        Booleans, negative ids and anything non-numeric (such as the ``"all"``
        sentinel) are rejected.
        """

        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, int):
            return cls(value) if value >= 0 else None
        text = str(value).strip()
        product_part, sep, price_part = text.partition(SEPARATOR)
        if not product_part.isdigit():
            return None
        if not sep:
            return cls(int(product_part))
        if not price_part.isdigit():
            return None
        return cls(int(product_part), int(price_part))

    def __str__(self) -> str:
        if self.price_id is None:
            return str(self.product_id)
        return f"{self.product_id}{SEPARATOR}{self.price_id}"

    @property
    def option_key(self):
        """Return the key used for this value in a dropdown option mapping."""
        return self.product_id if self.price_id is None else str(self)


__all__ = ["ProductValue"]
