"""
Shared fixtures for all tests.

factory-boy factories live here so both unit/ and integration/ can import them.
"""
from datetime import date
from decimal import Decimal

import factory
import pytest

from pharmacy.models import (
    Contract,
    Doctor,
    Drug,
    InventoryItem,
    Manufacturer,
    Patient,
    Pharmacy,
    Prescription,
    PrescriptionLine,
)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

class DoctorFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Doctor

    national_id = factory.Sequence(lambda n: f'{100000000000 + n}')
    name = factory.Sequence(lambda n: f'Dr. Sharma {n}')
    specialty = 'Cardiology'
    years_of_experience = 15


class PatientFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Patient

    national_id = factory.Sequence(lambda n: f'{900000000000 + n}')
    name = factory.Sequence(lambda n: f'Rahul Mehta {n}')
    address = 'Mumbai'
    age = 35
    primary_physician = factory.SubFactory(DoctorFactory)


class ManufacturerFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Manufacturer

    name = factory.Sequence(lambda n: f'Sun Pharma {n}')
    phone = '9876543210'


class PharmacyFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Pharmacy

    name = 'Nova Central'
    address = 'MG Road, Bangalore'
    phone = '9988776655'


class DrugFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Drug

    trade_name = factory.Sequence(lambda n: f'Paracetamol {n}')
    formula = 'C8H9NO2'
    manufacturer = factory.SubFactory(ManufacturerFactory)


class ContractFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Contract

    pharmacy = factory.SubFactory(PharmacyFactory)
    manufacturer = factory.SubFactory(ManufacturerFactory)
    start_date = date(2024, 1, 1)
    end_date = date(2024, 12, 31)
    content = 'Supply of pain medications and antibiotics'
    supervisor = 'Neha Singh'


class InventoryItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = InventoryItem

    pharmacy = factory.SubFactory(PharmacyFactory)
    drug = factory.SubFactory(DrugFactory)
    price = Decimal('5.99')
    stock = 100


class PrescriptionFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Prescription

    patient = factory.SubFactory(PatientFactory)
    doctor = factory.SelfAttribute('patient.primary_physician')
    prescription_date = date(2024, 3, 15)


class PrescriptionLineFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = PrescriptionLine

    prescription = factory.SubFactory(PrescriptionFactory)
    drug = factory.SubFactory(DrugFactory)
    quantity = 20


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def doctor_with_two_patients():
    """一个医生 + 两个病人，删除其中一个是允许的。"""
    doctor = DoctorFactory()
    first = PatientFactory(primary_physician=doctor)
    second = PatientFactory(primary_physician=doctor)
    return doctor, first, second


@pytest.fixture
def stocked_pharmacy():
    """一家药店，上架了同一厂商的两种药。"""
    manufacturer = ManufacturerFactory()
    pharmacy = PharmacyFactory()
    drugs = [DrugFactory(manufacturer=manufacturer), DrugFactory(manufacturer=manufacturer)]
    for drug in drugs:
        InventoryItemFactory(pharmacy=pharmacy, drug=drug)
    return pharmacy, manufacturer, drugs
