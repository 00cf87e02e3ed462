import dataclasses
import json
import math
import re
import sys
from decimal import Decimal, ROUND_CEILING
from typing import Dict, Optional

from src.logging_config import configure_logging, get_logger
from src.model.ReceiptModel import Receipt
from src.points.validators import is_afternoon, is_odd_day

logger = get_logger(__name__)

ALNUM_PATTERN = re.compile(r'[A-Za-z0-9]')
NUMBER_PATTERN = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10


def parse_amount(value) -> Optional[Decimal]:
    """
    Parse a money string, returning None when it is not a plain decimal
    number that fits in a float. Surrounding whitespace, digit separators,
    NaN and infinities all count as unparseable.
    """
    if not isinstance(value, str) or not NUMBER_PATTERN.fullmatch(value):
        return None
    if not math.isfinite(float(value)):
        return None
    return Decimal(value)


def retailer_points(retailer: str) -> int:
    return len(ALNUM_PATTERN.findall(retailer))


def round_dollar_points(total: str) -> int:
    amount = parse_amount(total)
    if amount is None or amount != amount.to_integral_value():
        return 0
    return ROUND_DOLLAR_POINTS


def quarter_multiple_points(total: str) -> int:
    amount = parse_amount(total)
    if amount is None:
        return 0
    # int() truncates toward zero, same as the cent scaling of the rule
    cents = int(amount * 100)
    if cents % 25 != 0:
        return 0
    return QUARTER_MULTIPLE_POINTS


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        # length in UTF-8 bytes, not characters
        if len(item.short_description.strip().encode("utf-8")) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            continue
        earned = (price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING)
        points += int(earned)
    return points


def odd_day_points(purchase_date: str) -> int:
    return ODD_DAY_POINTS if is_odd_day(purchase_date) else 0


def afternoon_points(purchase_time: str) -> int:
    return AFTERNOON_POINTS if is_afternoon(purchase_time) else 0


def points_breakdown(receipt: Receipt) -> Dict[str, int]:
    """
    Score every rule on its own. The rules never exclude each other, so a
    total of "10.00" earns both the round dollar and the quarter multiple
    points. Fields that do not parse just earn nothing for their rule.
    """
    return {
        "retailer_alphanumeric": retailer_points(receipt.retailer),
        "round_dollar_total": round_dollar_points(receipt.total),
        "quarter_multiple_total": quarter_multiple_points(receipt.total),
        "item_pairs": item_pair_points(receipt),
        "item_descriptions": description_points(receipt),
        "odd_purchase_day": odd_day_points(receipt.purchase_date),
        "afternoon_purchase": afternoon_points(receipt.purchase_time),
    }


def calculate_points(receipt: Receipt) -> int:
    breakdown = points_breakdown(receipt)
    points = sum(breakdown.values())
    logger.debug("receipt_scored", points=points, **breakdown)
    return points


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python -m src.points.engine <receipt.json>", file=sys.stderr)
        sys.exit(2)
    configure_logging(log_level="WARNING")
    with open(sys.argv[1], "r", encoding="utf-8") as f:
        receipt = Receipt.from_dict(json.load(f))
    result = {
        "receipt": dataclasses.asdict(receipt),
        "breakdown": points_breakdown(receipt),
        "points": calculate_points(receipt),
    }
    print(json.dumps(result, indent=4))
