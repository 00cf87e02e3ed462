from typing import List

from pydantic import BaseModel, Field

from src.model.ReceiptModel import Receipt


class ItemPayload(BaseModel):
    shortDescription: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)


class ReceiptPayload(BaseModel):
    retailer: str = Field(..., min_length=1)
    purchaseDate: str = Field(..., min_length=1)
    purchaseTime: str = Field(..., min_length=1)
    items: List[ItemPayload] = Field(..., min_length=1)
    total: str = Field(..., min_length=1)

    def to_receipt(self) -> Receipt:
        return Receipt.from_dict(self.model_dump())


class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
