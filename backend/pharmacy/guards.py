"""
存在性检查 + 删除前置条件（guard rules）。

所有规则都是显式的谓词查询，而不是数据库触发器：
规则可见、可单测、换存储也能照搬。

get_*      → 返回实体，不存在时抛 NotFoundError
*_has_* / count_* → 纯谓词，不抛异常
"""

from .exceptions import NotFoundError
from .models import (
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


def _get_or_raise(model, entity, code, for_update=False, **lookup):
    queryset = model.objects.select_for_update() if for_update else model.objects
    try:
        return queryset.get(**lookup)
    except (model.DoesNotExist, ValueError, TypeError):
        # 非数字的自增 id 同样视为不存在
        key = ', '.join(f"{k}={v}" for k, v in lookup.items())
        raise NotFoundError(
            message=f"{entity} not found ({key}).",
            code=code,
            detail={'entity': entity, **{k: str(v) for k, v in lookup.items()}},
        )


# ---------------------------------------------------------------------------
# Existence
# ---------------------------------------------------------------------------

def get_doctor(national_id, for_update=False):
    return _get_or_raise(Doctor, 'Doctor', 'DOCTOR_NOT_FOUND', for_update, national_id=national_id)


def get_patient(national_id, for_update=False):
    return _get_or_raise(Patient, 'Patient', 'PATIENT_NOT_FOUND', for_update, national_id=national_id)


def get_manufacturer(name, for_update=False):
    return _get_or_raise(Manufacturer, 'Manufacturer', 'MANUFACTURER_NOT_FOUND', for_update, name=name)


def get_pharmacy(pharmacy_id, for_update=False):
    return _get_or_raise(Pharmacy, 'Pharmacy', 'PHARMACY_NOT_FOUND', for_update, id=pharmacy_id)


def get_drug(drug_id, for_update=False):
    return _get_or_raise(Drug, 'Drug', 'DRUG_NOT_FOUND', for_update, id=drug_id)


def get_contract(contract_id, for_update=False):
    return _get_or_raise(Contract, 'Contract', 'CONTRACT_NOT_FOUND', for_update, id=contract_id)


def get_prescription(prescription_id, for_update=False):
    return _get_or_raise(Prescription, 'Prescription', 'PRESCRIPTION_NOT_FOUND', for_update, id=prescription_id)


def get_inventory_item(pharmacy_id, drug_id, for_update=False):
    """药店未上架该药时抛 NotFoundError(INVENTORY_ITEM_NOT_FOUND)。"""
    return _get_or_raise(
        InventoryItem, 'InventoryItem', 'INVENTORY_ITEM_NOT_FOUND', for_update,
        pharmacy_id=pharmacy_id, drug_id=drug_id,
    )


def get_prescription_line(prescription_id, drug_id, for_update=False):
    return _get_or_raise(
        PrescriptionLine, 'PrescriptionLine', 'PRESCRIPTION_LINE_NOT_FOUND', for_update,
        prescription_id=prescription_id, drug_id=drug_id,
    )


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def count_other_patients(patient):
    """同一医生名下、除 patient 本人以外的病人数。为 0 时不允许删除 patient。"""
    return (
        Patient.objects
        .filter(primary_physician_id=patient.primary_physician_id)
        .exclude(national_id=patient.national_id)
        .count()
    )


def patient_has_prescriptions(national_id):
    return Prescription.objects.filter(patient_id=national_id).exists()


def doctor_has_patients(national_id):
    return Patient.objects.filter(primary_physician_id=national_id).exists()


def doctor_has_prescriptions(national_id):
    return Prescription.objects.filter(doctor_id=national_id).exists()


def drug_is_prescribed(drug_id):
    return PrescriptionLine.objects.filter(drug_id=drug_id).exists()


def prescribed_drugs_of_manufacturer(name):
    """厂商名下已被处方引用的药品 id 列表。"""
    return list(
        PrescriptionLine.objects
        .filter(drug__manufacturer_id=name)
        .values_list('drug_id', flat=True)
        .distinct()
        .order_by('drug_id')
    )


def manufacturer_name_taken(name):
    return Manufacturer.objects.filter(name=name).exists()


def drug_name_taken(trade_name, manufacturer_name, exclude_id=None):
    queryset = Drug.objects.filter(trade_name=trade_name, manufacturer_id=manufacturer_name)
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)
    return queryset.exists()


def prescription_date_taken(patient_id, doctor_id, prescription_date, exclude_id=None):
    queryset = Prescription.objects.filter(
        patient_id=patient_id,
        doctor_id=doctor_id,
        prescription_date=prescription_date,
    )
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)
    return queryset.exists()


def count_prescription_lines(prescription_id):
    return PrescriptionLine.objects.filter(prescription_id=prescription_id).count()
