import threading
from typing import Dict
from uuid import uuid4

from src.logging_config import get_logger
from src.model.ReceiptModel import Receipt
from src.points.engine import calculate_points
from src.points.validators import is_valid_total
from src.store.errors import ReceiptNotFoundError, ReceiptValidationError

logger = get_logger(__name__)


class ReceiptStore:
    """
    In-memory receipts keyed by a generated id, with the points computed
    once at insertion. Both maps are only touched while holding the lock,
    so an id is never visible in one map and missing from the other.
    Nothing is ever updated or removed.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._receipts: Dict[str, Receipt] = {}
        self._points: Dict[str, int] = {}

    def insert(self, receipt: Receipt) -> str:
        if not is_valid_total(receipt.total):
            raise ReceiptValidationError("Invalid total format")

        points = calculate_points(receipt)
        with self._lock:
            receipt_id = str(uuid4())
            while receipt_id in self._receipts:
                receipt_id = str(uuid4())
            self._receipts[receipt_id] = receipt
            self._points[receipt_id] = points

        logger.info("receipt_processed", receipt_id=receipt_id, points=points, items=len(receipt.items))
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        with self._lock:
            points = self._points.get(receipt_id)
        if points is None:
            raise ReceiptNotFoundError(receipt_id)
        return points

    def __contains__(self, receipt_id) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
