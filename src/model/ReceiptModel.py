from dataclasses import dataclass
from typing import Tuple

from src.model.ReceiptItemModel import ReceiptItem


@dataclass(frozen=True)
class Receipt:
    retailer: str
    purchase_date: str
    purchase_time: str
    items: Tuple[ReceiptItem, ...]
    total: str

    @classmethod
    def from_dict(cls, data: dict) -> "Receipt":
        """Build a receipt from the camelCase JSON shape used on the wire."""
        return cls(
            retailer=data["retailer"],
            purchase_date=data["purchaseDate"],
            purchase_time=data["purchaseTime"],
            items=tuple(
                ReceiptItem(short_description=item["shortDescription"], price=item["price"])
                for item in data["items"]
            ),
            total=data["total"],
        )
