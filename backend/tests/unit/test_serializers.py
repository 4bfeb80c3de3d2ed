"""
Unit tests for serializer functions.

日期输出 ISO 8601，金额输出字符串；报表行在基础行上追加字段。
"""
from datetime import date
from decimal import Decimal

import pytest

from pharmacy import reports
from pharmacy.serializers import (
    serialize_catalog_drug,
    serialize_contract,
    serialize_contract_detail,
    serialize_doctor_patient,
    serialize_inventory_item,
    serialize_patient,
    serialize_prescription_detail,
    serialize_rows,
)
from tests.conftest import (
    ContractFactory,
    DrugFactory,
    InventoryItemFactory,
    PatientFactory,
    PrescriptionLineFactory,
)


@pytest.mark.django_db
class TestRowSerializers:

    def test_patient(self):
        patient = PatientFactory(age=42)
        result = serialize_patient(patient)

        assert result['age'] == 42
        assert result['primary_physician_id'] == patient.primary_physician_id

    def test_contract_dates_are_iso(self):
        contract = ContractFactory()
        result = serialize_contract(contract)

        assert result['start_date'] == '2024-01-01'
        assert result['end_date'] == '2024-12-31'
        assert result['manufacturer'] == contract.manufacturer_id

    def test_inventory_price_is_string(self):
        item = InventoryItemFactory(price=Decimal('12.50'))
        result = serialize_inventory_item(item)

        assert result['price'] == '12.50'
        assert result['drug_name'] == item.drug.trade_name


@pytest.mark.django_db
class TestReportSerializers:

    def test_prescription_detail_includes_patient(self):
        line = PrescriptionLineFactory(quantity=14)
        patient = line.prescription.patient

        result = serialize_prescription_detail(line)

        assert result['patient_name'] == patient.name
        assert result['patient_age'] == patient.age
        assert result['doctor_name'] == line.prescription.doctor.name
        assert result['prescription_date'] == date(2024, 3, 15).isoformat()
        assert result['quantity'] == 14

    def test_catalog_drug(self):
        drug = DrugFactory()
        InventoryItemFactory(drug=drug)

        row = reports.manufacturer_catalog(drug.manufacturer_id).get()

        assert serialize_catalog_drug(row)['available_at_pharmacies_count'] == 1

    def test_contract_detail_company_fields(self):
        contract = ContractFactory()
        result = serialize_contract_detail(contract)

        assert result['company_name'] == contract.manufacturer.name
        assert result['company_phone'] == contract.manufacturer.phone
        assert result['pharmacy_name'] == contract.pharmacy.name

    def test_doctor_patient_adds_count(self):
        patient = PatientFactory()
        row = reports.doctor_patients(patient.primary_physician_id).get()

        result = serialize_doctor_patient(row)

        assert result['national_id'] == patient.national_id
        assert result['prescription_count'] == 0


class TestSerializeRows:

    def test_empty(self):
        assert serialize_rows([], serialize_patient) == {'count': 0, 'results': []}

    def test_wraps_results(self):
        result = serialize_rows([{'x': 1}, {'x': 2}], lambda row: row['x'])
        assert result == {'count': 2, 'results': [1, 2]}
