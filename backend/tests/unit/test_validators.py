"""
Unit tests for validators — 纯函数，不需要数据库。
"""
from datetime import date, datetime
from decimal import Decimal

import pytest

from pharmacy.exceptions import InvalidArgumentError
from pharmacy import validators


def _fields(exc_info):
    return [e['field'] for e in exc_info.value.detail['errors']]


class TestValidateDoctor:

    def test_valid(self):
        validators.validate_doctor('123456789012', 'Dr. Sharma', 'Cardiology', 0)

    def test_collects_all_errors(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_doctor('12345', '', 'Cardiology', -1)

        assert exc_info.value.code == 'INVALID_ARGUMENT'
        assert _fields(exc_info) == ['national_id', 'name', 'years_of_experience']


class TestValidatePatient:

    def test_valid(self):
        validators.validate_patient('987654321098', 'Rahul Mehta', 'Mumbai', 35)

    @pytest.mark.parametrize('age', [0, -5, None, '35'])
    def test_age_must_be_positive_int(self, age):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_patient('987654321098', 'Rahul Mehta', 'Mumbai', age)
        assert _fields(exc_info) == ['age']

    def test_national_id_with_letters_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_patient('98765432109X', 'Rahul Mehta', 'Mumbai', 35)
        assert _fields(exc_info) == ['national_id']


class TestValidateContractDates:

    def test_parses_iso_strings(self):
        start, end = validators.validate_contract_dates('2024-01-01', '2024-12-31')
        assert start == date(2024, 1, 1)
        assert end == date(2024, 12, 31)

    def test_end_equal_to_start_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_contract_dates(date(2024, 1, 1), date(2024, 1, 1))
        assert _fields(exc_info) == ['end_date']

    def test_end_before_start_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validators.validate_contract_dates(date(2024, 6, 1), date(2024, 1, 1))

    def test_garbage_date_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_contract_dates('not-a-date', date(2024, 1, 1))
        assert _fields(exc_info) == ['start_date']


class TestValidateInventory:

    def test_returns_quantized_decimal(self):
        assert validators.validate_inventory(5.99, 10) == Decimal('5.99')
        assert validators.validate_inventory('12.5', 0) == Decimal('12.50')

    @pytest.mark.parametrize('price', [0, -1, '0.001', 'abc', 'NaN'])
    def test_bad_price(self, price):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_inventory(price, 10)
        assert _fields(exc_info) == ['price']

    def test_negative_stock(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_inventory(Decimal('5.00'), -1)
        assert _fields(exc_info) == ['stock']

    def test_both_bad(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_inventory(0, -1)
        assert _fields(exc_info) == ['price', 'stock']


class TestValidateQuantity:

    def test_positive_ok(self):
        validators.validate_quantity(1)

    @pytest.mark.parametrize('quantity', [0, -3])
    def test_non_positive_rejected(self, quantity):
        with pytest.raises(InvalidArgumentError):
            validators.validate_quantity(quantity)


class TestValidateRequired:

    def test_blank_string_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_required(name='  ', phone='123')
        assert _fields(exc_info) == ['name']


class TestNationalIdFormat:

    @pytest.mark.parametrize('national_id', [
        '123456789012\n',
        '١٢٣٤٥٦٧٨٩٠١٢',  # 阿拉伯-印度数字
        ' 123456789012',
        123456789012,
    ])
    def test_only_twelve_ascii_digits(self, national_id):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_doctor(national_id, 'Dr. Sharma', 'Cardiology', 1)
        assert _fields(exc_info) == ['national_id']


class TestDateNormalization:

    def test_datetime_becomes_date(self):
        parsed = validators.validate_prescription_date(datetime(2024, 6, 1, 9, 0))
        assert parsed == date(2024, 6, 1)
        assert type(parsed) is date

    def test_contract_datetimes_compared_as_dates(self):
        start, end = validators.validate_contract_dates(datetime(2024, 1, 1, 23, 0), date(2024, 1, 2))
        assert (start, end) == (date(2024, 1, 1), date(2024, 1, 2))


class TestBoolIsNotInt:

    def test_age_true_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_patient('987654321098', 'Rahul Mehta', 'Mumbai', True)
        assert _fields(exc_info) == ['age']

    def test_quantity_true_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validators.validate_quantity(True)

    def test_stock_false_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_inventory('5.00', False)
        assert _fields(exc_info) == ['stock']

    def test_stock_beyond_integer_column_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validators.validate_inventory('5.00', 2 ** 31)


class TestPriceBounds:

    @pytest.mark.parametrize('price', [Decimal('1e30'), Decimal('123456789012.50'), '100000000'])
    def test_too_large_rejected(self, price):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_inventory(price, 1)
        assert _fields(exc_info) == ['price']

    def test_largest_allowed(self):
        assert validators.validate_inventory('99999999.99', 1) == Decimal('99999999.99')


class TestFieldLengths:

    def test_phone_over_fifteen_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_required(name='Cipla', phone='1' * 16)
        assert _fields(exc_info) == ['phone']

    def test_name_over_hundred_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validators.validate_doctor('123456789012', 'x' * 101, 'Cardiology', 1)
        assert _fields(exc_info) == ['name']

    def test_exact_limits_accepted(self):
        validators.validate_required(name='x' * 100, address='y' * 255, phone='1' * 15)

    def test_content_has_no_limit(self):
        validators.validate_required(content='z' * 5000)
