import copy
import os

os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.app import app, get_store  # noqa: E402
from src.model.ReceiptModel import Receipt  # noqa: E402
from src.store.receipt_store import ReceiptStore  # noqa: E402

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture()
def target_receipt() -> Receipt:
    return Receipt.from_dict(TARGET_RECEIPT)


@pytest.fixture()
def corner_market_receipt() -> Receipt:
    return Receipt.from_dict(CORNER_MARKET_RECEIPT)


@pytest.fixture()
def store() -> ReceiptStore:
    return ReceiptStore()


@pytest.fixture()
def client(store: ReceiptStore):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def target_payload() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture()
def corner_market_payload() -> dict:
    return copy.deepcopy(CORNER_MARKET_RECEIPT)
