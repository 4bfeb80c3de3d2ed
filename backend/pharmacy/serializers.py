"""
Row serializers — ORM 对象 → JSON-able dict。

只负责「输出格式化」，不做任何查询条件或校验；查询在 reports.py。
日期统一输出 ISO 8601，金额输出字符串（保留两位小数）。
"""


def serialize_doctor(doctor):
    return {
        'national_id': doctor.national_id,
        'name': doctor.name,
        'specialty': doctor.specialty,
        'years_of_experience': doctor.years_of_experience,
    }


def serialize_patient(patient):
    return {
        'national_id': patient.national_id,
        'name': patient.name,
        'address': patient.address,
        'age': patient.age,
        'primary_physician_id': patient.primary_physician_id,
    }


def serialize_manufacturer(manufacturer):
    return {
        'name': manufacturer.name,
        'phone': manufacturer.phone,
    }


def serialize_pharmacy(pharmacy):
    return {
        'id': pharmacy.id,
        'name': pharmacy.name,
        'address': pharmacy.address,
        'phone': pharmacy.phone,
    }


def serialize_drug(drug):
    return {
        'id': drug.id,
        'trade_name': drug.trade_name,
        'formula': drug.formula,
        'manufacturer': drug.manufacturer_id,
    }


def serialize_contract(contract):
    return {
        'id': contract.id,
        'pharmacy_id': contract.pharmacy_id,
        'pharmacy_name': contract.pharmacy.name,
        'manufacturer': contract.manufacturer_id,
        'start_date': contract.start_date.isoformat(),
        'end_date': contract.end_date.isoformat(),
        'content': contract.content,
        'supervisor': contract.supervisor,
    }


def serialize_inventory_item(item):
    return {
        'pharmacy_id': item.pharmacy_id,
        'pharmacy_name': item.pharmacy.name,
        'drug_id': item.drug_id,
        'drug_name': item.drug.trade_name,
        'price': str(item.price),
        'stock': item.stock,
    }


def serialize_prescription(prescription):
    return {
        'id': prescription.id,
        'patient_id': prescription.patient_id,
        'patient_name': prescription.patient.name,
        'doctor_id': prescription.doctor_id,
        'doctor_name': prescription.doctor.name,
        'prescription_date': prescription.prescription_date.isoformat(),
    }


def serialize_prescription_line(line):
    return {
        'prescription_id': line.prescription_id,
        'prescription_date': line.prescription.prescription_date.isoformat(),
        'drug_id': line.drug_id,
        'drug_name': line.drug.trade_name,
        'quantity': line.quantity,
    }


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def serialize_period_line(line):
    """patient_prescriptions_in_period 的一行。"""
    prescription = line.prescription
    return {
        'prescription_id': prescription.id,
        'prescription_date': prescription.prescription_date.isoformat(),
        'doctor_name': prescription.doctor.name,
        'doctor_specialty': prescription.doctor.specialty,
        'drug_name': line.drug.trade_name,
        'drug_formula': line.drug.formula,
        'manufacturer': line.drug.manufacturer_id,
        'quantity': line.quantity,
    }


def serialize_prescription_detail(line):
    """prescription_details 的一行：在 period 行基础上加病人信息。"""
    patient = line.prescription.patient
    row = serialize_period_line(line)
    row.update({
        'patient_name': patient.name,
        'patient_age': patient.age,
        'patient_address': patient.address,
    })
    return row


def serialize_catalog_drug(drug):
    return {
        'drug_id': drug.id,
        'trade_name': drug.trade_name,
        'formula': drug.formula,
        'available_at_pharmacies_count': drug.available_at_pharmacies_count,
    }


def serialize_stock_position(item):
    return {
        'pharmacy_name': item.pharmacy.name,
        'pharmacy_address': item.pharmacy.address,
        'drug_name': item.drug.trade_name,
        'drug_formula': item.drug.formula,
        'manufacturer': item.drug.manufacturer_id,
        'selling_price': str(item.price),
        'available_quantity': item.stock,
    }


def serialize_contract_detail(contract):
    return {
        'contract_id': contract.id,
        'pharmacy_name': contract.pharmacy.name,
        'pharmacy_address': contract.pharmacy.address,
        'pharmacy_phone': contract.pharmacy.phone,
        'company_name': contract.manufacturer.name,
        'company_phone': contract.manufacturer.phone,
        'start_date': contract.start_date.isoformat(),
        'end_date': contract.end_date.isoformat(),
        'supervisor': contract.supervisor,
        'content': contract.content,
    }


def serialize_doctor_patient(patient):
    row = serialize_patient(patient)
    row['prescription_count'] = patient.prescription_count
    return row


def serialize_rows(rows, serializer):
    """列表结果统一包一层 count，风格同搜索结果。"""
    results = [serializer(row) for row in rows]
    return {
        'count': len(results),
        'results': results,
    }
