"""
只读查询：列表 + 报表。

全部是纯 join / 投影，不修改任何数据，也不做存在性校验
（查不到就是空结果）。返回 queryset，由 serializers 转成 dict。
"""

from django.db.models import Count, Q

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
from .validators import as_date


# ---------------------------------------------------------------------------
# List-all
# ---------------------------------------------------------------------------

def list_patients():
    return Patient.objects.select_related('primary_physician').order_by('name', 'national_id')


def list_doctors():
    return Doctor.objects.order_by('name', 'national_id')


def list_manufacturers():
    return Manufacturer.objects.order_by('name')


def list_pharmacies():
    return Pharmacy.objects.order_by('id')


def list_drugs():
    return Drug.objects.select_related('manufacturer').order_by('id')


def list_contracts():
    return Contract.objects.select_related('pharmacy', 'manufacturer').order_by('id')


def list_inventory():
    return InventoryItem.objects.select_related('pharmacy', 'drug').order_by('pharmacy_id', 'drug_id')


def list_prescriptions():
    return Prescription.objects.select_related('patient', 'doctor').order_by('id')


def list_prescription_lines():
    return PrescriptionLine.objects.select_related('prescription', 'drug').order_by('prescription_id', 'drug_id')


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def patient_prescriptions_in_period(patient_id, start_date, end_date):
    """病人在 [start_date, end_date] 内的处方明细，每行一个药品，按日期倒序。"""
    return (
        PrescriptionLine.objects
        .select_related('prescription__doctor', 'drug')
        .filter(
            prescription__patient_id=patient_id,
            prescription__prescription_date__range=(as_date(start_date), as_date(end_date)),
        )
        .order_by('-prescription__prescription_date', 'prescription_id', 'drug__trade_name')
    )


def prescription_details(patient_id, prescription_date):
    """病人某一天的处方明细，按药品商品名排序。"""
    return (
        PrescriptionLine.objects
        .select_related('prescription__patient', 'prescription__doctor', 'drug')
        .filter(
            prescription__patient_id=patient_id,
            prescription__prescription_date=as_date(prescription_date),
        )
        .order_by('drug__trade_name')
    )


def manufacturer_catalog(manufacturer_name):
    """厂商的全部药品 + 每种药在多少家药店有售。"""
    return (
        Drug.objects
        .filter(manufacturer_id=manufacturer_name)
        .annotate(available_at_pharmacies_count=Count('inventory_items'))
        .order_by('trade_name')
    )


def pharmacy_stock(pharmacy_id):
    """药店库存：售价 + 可用数量，按药品商品名排序。"""
    return (
        InventoryItem.objects
        .select_related('pharmacy', 'drug')
        .filter(pharmacy_id=pharmacy_id)
        .order_by('drug__trade_name')
    )


def contract_details(pharmacy_id, manufacturer_name):
    """某药店与某厂商之间的合同，结束日期最近的在前。"""
    return (
        Contract.objects
        .select_related('pharmacy', 'manufacturer')
        .filter(pharmacy_id=pharmacy_id, manufacturer_id=manufacturer_name)
        .order_by('-end_date', '-id')
    )


def doctor_patients(doctor_id):
    """医生名下病人 + 每个病人由该医生开出的处方数。"""
    return (
        Patient.objects
        .filter(primary_physician_id=doctor_id)
        .annotate(
            prescription_count=Count(
                'prescriptions',
                filter=Q(prescriptions__doctor_id=doctor_id),
            ),
        )
        .order_by('name', 'national_id')
    )
