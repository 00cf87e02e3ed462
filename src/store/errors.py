class ReceiptValidationError(ValueError):
    pass


class ReceiptNotFoundError(KeyError):
    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

    def __str__(self):
        return f"Receipt not found: {self.receipt_id}"
