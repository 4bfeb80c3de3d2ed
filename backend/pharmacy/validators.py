"""
值约束校验。

每个 validate_* 函数检查一次调用涉及的所有字段，把错误收集成列表，
最后统一抛出一个 InvalidArgumentError（detail = {'errors': [...]}），
保证在任何写操作之前失败。
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidArgumentError

# ── 共用校验正则 ─────────────────────────────────────────────────────────────
NATIONAL_ID_RE = re.compile(r"\d{12}", re.ASCII)

# 与 models.py 的列宽保持一致
FIELD_MAX_LENGTHS = {
    "name": 100,
    "new_name": 100,
    "specialty": 100,
    "trade_name": 100,
    "supervisor": 100,
    "address": 255,
    "formula": 255,
    "phone": 15,
}

CENT = Decimal("0.01")
# DECIMAL(10, 2)：整数部分最多 8 位
MAX_PRICE = Decimal("100000000")
# IntegerField 在 PostgreSQL 上是 32 位
MAX_INT = 2147483647


def as_date(value):
    """接受 date、datetime（取日期部分）或 ISO 8601 字符串（"YYYY-MM-DD"）。"""
    if isinstance(value, str):
        return date.fromisoformat(value)
    if isinstance(value, datetime):
        return value.date()
    return value


def as_decimal(value):
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _is_int(value):
    # bool 是 int 的子类，True 不能当 1 用
    return isinstance(value, int) and not isinstance(value, bool) and value <= MAX_INT


def raise_if_errors(errors, message="Request validation failed."):
    if errors:
        raise InvalidArgumentError(
            message=message,
            code="INVALID_ARGUMENT",
            detail={"errors": errors},
        )


def _check_national_id(errors, field, value):
    if not isinstance(value, str) or not NATIONAL_ID_RE.fullmatch(value):
        errors.append({"field": field, "message": "National ID must be exactly 12 digits."})


def _check_required(errors, field, value):
    if not isinstance(value, str) or not value.strip():
        errors.append({"field": field, "message": f"{field} is required."})
        return
    max_length = FIELD_MAX_LENGTHS.get(field)
    if max_length is not None and len(value) > max_length:
        errors.append({"field": field, "message": f"{field} must be at most {max_length} characters."})


def validate_required(**fields):
    errors = []
    for field, value in fields.items():
        _check_required(errors, field, value)
    raise_if_errors(errors)


def _parse_date(errors, field, value):
    try:
        parsed = as_date(value)
    except (TypeError, ValueError):
        parsed = None
    if not isinstance(parsed, date):
        errors.append({"field": field, "message": f"Invalid date: {value!r}."})
        return None
    return parsed


def validate_doctor(national_id, name, specialty, years_of_experience):
    errors = []
    _check_national_id(errors, "national_id", national_id)
    _check_required(errors, "name", name)
    _check_required(errors, "specialty", specialty)
    if not _is_int(years_of_experience) or years_of_experience < 0:
        errors.append({"field": "years_of_experience", "message": "Years of experience must be a non-negative integer."})
    raise_if_errors(errors)


def validate_patient(national_id, name, address, age):
    errors = []
    _check_national_id(errors, "national_id", national_id)
    _check_required(errors, "name", name)
    _check_required(errors, "address", address)
    if not _is_int(age) or age <= 0:
        errors.append({"field": "age", "message": "Age must be a positive integer."})
    raise_if_errors(errors)


def validate_contract_dates(start_date, end_date):
    """返回解析后的 (start_date, end_date)。"""
    errors = []
    start = _parse_date(errors, "start_date", start_date)
    end = _parse_date(errors, "end_date", end_date)
    if start and end and end <= start:
        errors.append({"field": "end_date", "message": "End date must be after start date."})
    raise_if_errors(errors)
    return start, end


def validate_price(errors, price):
    try:
        value = as_decimal(price)
        if value.is_finite():
            value = value.quantize(CENT)
    except (InvalidOperation, TypeError, ValueError):
        errors.append({"field": "price", "message": f"Invalid price: {price!r}."})
        return None
    if not value.is_finite() or value <= 0:
        errors.append({"field": "price", "message": "Price must be greater than zero."})
        return None
    if value >= MAX_PRICE:
        errors.append({"field": "price", "message": "Price must have at most 8 integer digits."})
        return None
    return value


def validate_stock(errors, stock):
    if not _is_int(stock) or stock < 0:
        errors.append({"field": "stock", "message": "Stock must be a non-negative integer."})


def validate_inventory(price, stock):
    """price > 0 且 stock >= 0。返回规范化后的 Decimal 价格。"""
    errors = []
    value = validate_price(errors, price)
    validate_stock(errors, stock)
    raise_if_errors(errors)
    return value


def validate_quantity(quantity):
    if not _is_int(quantity) or quantity <= 0:
        raise_if_errors([{"field": "quantity", "message": "Quantity must be a positive integer."}])


def validate_prescription_date(prescription_date):
    errors = []
    parsed = _parse_date(errors, "prescription_date", prescription_date)
    raise_if_errors(errors)
    return parsed
