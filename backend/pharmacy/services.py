"""
数据完整性层：每个增 / 改 / 删用例对应一个函数。

每个函数都是一个独立事务（transaction.atomic）：
  1. 校验值约束（validators）        → InvalidArgumentError
  2. 校验被引用实体存在（guards.get_*） → NotFoundError
  3. 唯一性 / 删除前置条件（guards）   → DuplicateKeyError / DependencyExistsError / IntegrityViolationError
  4. 执行写操作（需要时按依赖顺序级联）

任何一步抛异常，整个事务回滚，调用方看不到部分写入。
"""

import logging

from django.db import IntegrityError, transaction

from . import guards, validators
from .exceptions import DependencyExistsError, DuplicateKeyError, IntegrityViolationError
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
from .prescriptions import PrescriptionAction, decide_prescription_action

logger = logging.getLogger(__name__)


def _insert(model, code, message, detail, **fields):
    """INSERT；唯一约束兜底冲突（并发写入）转成 DuplicateKeyError。"""
    try:
        return model.objects.create(**fields)
    except IntegrityError as exc:
        raise DuplicateKeyError(message=message, code=code, detail=detail) from exc


# ===========================================================================
# Doctor / Patient
# ===========================================================================

@transaction.atomic
def add_doctor(national_id, name, specialty, years_of_experience):
    validators.validate_doctor(national_id, name, specialty, years_of_experience)

    message = f"Doctor {national_id} already exists."
    detail = {'entity': 'Doctor', 'national_id': national_id}
    if Doctor.objects.filter(national_id=national_id).exists():
        raise DuplicateKeyError(message=message, code='DOCTOR_EXISTS', detail=detail)

    doctor = _insert(
        Doctor, 'DOCTOR_EXISTS', message, detail,
        national_id=national_id,
        name=name,
        specialty=specialty,
        years_of_experience=years_of_experience,
    )
    logger.info("[Service][add_doctor] doctor=%s 已创建", doctor.national_id)
    return doctor.national_id


@transaction.atomic
def update_doctor(national_id, name, specialty, years_of_experience):
    validators.validate_doctor(national_id, name, specialty, years_of_experience)
    doctor = guards.get_doctor(national_id, for_update=True)

    doctor.name = name
    doctor.specialty = specialty
    doctor.years_of_experience = years_of_experience
    doctor.save(update_fields=['name', 'specialty', 'years_of_experience'])
    logger.info("[Service][update_doctor] doctor=%s 已更新", national_id)


@transaction.atomic
def delete_doctor(national_id):
    """医生名下还有病人或处方时不能删除。"""
    doctor = guards.get_doctor(national_id, for_update=True)

    if guards.doctor_has_patients(national_id):
        logger.warning("[Service][delete_doctor] doctor=%s 仍有病人，拒绝删除", national_id)
        raise DependencyExistsError(
            message=f"Cannot delete doctor {national_id}: doctor has assigned patients.",
            code='DOCTOR_HAS_PATIENTS',
            detail={'entity': 'Doctor', 'national_id': national_id, 'dependent': 'Patient'},
        )
    if guards.doctor_has_prescriptions(national_id):
        logger.warning("[Service][delete_doctor] doctor=%s 仍有处方，拒绝删除", national_id)
        raise DependencyExistsError(
            message=f"Cannot delete doctor {national_id}: doctor has existing prescriptions.",
            code='DOCTOR_HAS_PRESCRIPTIONS',
            detail={'entity': 'Doctor', 'national_id': national_id, 'dependent': 'Prescription'},
        )

    doctor.delete()
    logger.info("[Service][delete_doctor] doctor=%s 已删除", national_id)


@transaction.atomic
def add_patient(national_id, name, address, age, primary_physician_id):
    validators.validate_patient(national_id, name, address, age)
    doctor = guards.get_doctor(primary_physician_id)

    message = f"Patient {national_id} already exists."
    detail = {'entity': 'Patient', 'national_id': national_id}
    if Patient.objects.filter(national_id=national_id).exists():
        raise DuplicateKeyError(message=message, code='PATIENT_EXISTS', detail=detail)

    patient = _insert(
        Patient, 'PATIENT_EXISTS', message, detail,
        national_id=national_id,
        name=name,
        address=address,
        age=age,
        primary_physician=doctor,
    )
    logger.info("[Service][add_patient] patient=%s 已创建，医生=%s", patient.national_id, doctor.national_id)
    return patient.national_id


@transaction.atomic
def update_patient(national_id, name, address, age, primary_physician_id):
    """可以更换主治医生；「最后一个病人」规则只约束删除。"""
    validators.validate_patient(national_id, name, address, age)
    patient = guards.get_patient(national_id, for_update=True)
    doctor = guards.get_doctor(primary_physician_id)

    patient.name = name
    patient.address = address
    patient.age = age
    patient.primary_physician = doctor
    patient.save(update_fields=['name', 'address', 'age', 'primary_physician'])
    logger.info("[Service][update_patient] patient=%s 已更新", national_id)


@transaction.atomic
def delete_patient(national_id):
    """
    删除病人。

    - 病人有处方 → DependencyExistsError(PATIENT_HAS_PRESCRIPTIONS)
    - 同一医生名下除本人外没有其他病人 → IntegrityViolationError(DOCTOR_LAST_PATIENT)

    医生行加锁，避免两个并发删除各自看到「还有一个病人」。
    """
    patient = guards.get_patient(national_id)
    guards.get_doctor(patient.primary_physician_id, for_update=True)

    if guards.patient_has_prescriptions(national_id):
        logger.warning("[Service][delete_patient] patient=%s 仍有处方，拒绝删除", national_id)
        raise DependencyExistsError(
            message=f"Cannot delete patient {national_id}: patient has existing prescriptions.",
            code='PATIENT_HAS_PRESCRIPTIONS',
            detail={'entity': 'Patient', 'national_id': national_id, 'dependent': 'Prescription'},
        )

    if guards.count_other_patients(patient) == 0:
        logger.warning(
            "[Service][delete_patient] patient=%s 是医生 %s 的最后一个病人，拒绝删除",
            national_id, patient.primary_physician_id,
        )
        raise IntegrityViolationError(
            message=(
                f"Cannot delete patient {national_id}: doctor {patient.primary_physician_id} "
                f"must have at least one patient."
            ),
            code='DOCTOR_LAST_PATIENT',
            detail={
                'entity': 'Patient',
                'national_id': national_id,
                'doctor_id': patient.primary_physician_id,
            },
        )

    patient.delete()
    logger.info("[Service][delete_patient] patient=%s 已删除", national_id)


# ===========================================================================
# Manufacturer / Drug
# ===========================================================================

@transaction.atomic
def add_manufacturer(name, phone):
    validators.validate_required(name=name, phone=phone)

    message = f"Manufacturer '{name}' already exists."
    detail = {'entity': 'Manufacturer', 'name': name}
    if guards.manufacturer_name_taken(name):
        raise DuplicateKeyError(message=message, code='MANUFACTURER_EXISTS', detail=detail)

    manufacturer = _insert(Manufacturer, 'MANUFACTURER_EXISTS', message, detail, name=name, phone=phone)
    logger.info("[Service][add_manufacturer] manufacturer=%s 已创建", manufacturer.name)
    return manufacturer.name


@transaction.atomic
def update_manufacturer(old_name, new_name, phone):
    """
    更新厂商；改名是主键变更，需要扇出更新：

      1. 新名字不能已被占用
      2. 以新名字插入厂商行
      3. 所有 Drug / Contract 的引用改指新名字
      4. 删除旧厂商行（此时已无引用，不会级联删除药品）

    Returns:
        厂商当前的名字
    """
    validators.validate_required(new_name=new_name, phone=phone)
    manufacturer = guards.get_manufacturer(old_name, for_update=True)

    if new_name == old_name:
        manufacturer.phone = phone
        manufacturer.save(update_fields=['phone'])
        logger.info("[Service][update_manufacturer] manufacturer=%s 电话已更新", old_name)
        return old_name

    message = f"Manufacturer name '{new_name}' already exists."
    detail = {'entity': 'Manufacturer', 'name': new_name, 'old_name': old_name}
    if guards.manufacturer_name_taken(new_name):
        raise DuplicateKeyError(message=message, code='MANUFACTURER_EXISTS', detail=detail)

    renamed = _insert(Manufacturer, 'MANUFACTURER_EXISTS', message, detail, name=new_name, phone=phone)
    drugs = Drug.objects.filter(manufacturer=manufacturer).update(manufacturer=renamed)
    contracts = Contract.objects.filter(manufacturer=manufacturer).update(manufacturer=renamed)
    Manufacturer.objects.filter(name=old_name).delete()

    logger.info(
        "[Service][update_manufacturer] %s → %s 改名完成，药品 %d 条，合同 %d 条",
        old_name, new_name, drugs, contracts,
    )
    return new_name


@transaction.atomic
def delete_manufacturer(name):
    """
    删除厂商，依赖顺序：

      1. 名下任何药品已开处方 → DependencyExistsError（药品删除规则同样适用）
      2. 删除该厂商的全部合同
      3. 删除其药品在各药店的库存行
      4. 删除厂商，外键 CASCADE 连带删除药品
    """
    manufacturer = guards.get_manufacturer(name, for_update=True)

    prescribed = guards.prescribed_drugs_of_manufacturer(name)
    if prescribed:
        logger.warning("[Service][delete_manufacturer] manufacturer=%s 有药品已开处方 %s", name, prescribed)
        raise DependencyExistsError(
            message=f"Cannot delete manufacturer '{name}': its drugs are used in existing prescriptions.",
            code='MANUFACTURER_DRUGS_PRESCRIBED',
            detail={'entity': 'Manufacturer', 'name': name, 'drug_ids': prescribed},
        )

    contracts, _ = Contract.objects.filter(manufacturer_id=name).delete()
    inventory, _ = InventoryItem.objects.filter(drug__manufacturer_id=name).delete()
    _, deleted = manufacturer.delete()

    logger.info(
        "[Service][delete_manufacturer] manufacturer=%s 已删除，合同 %d 条，库存 %d 条，药品 %d 条",
        name, contracts, inventory, deleted.get(Drug._meta.label, 0),
    )


@transaction.atomic
def add_drug(trade_name, formula, manufacturer_name):
    validators.validate_required(trade_name=trade_name, formula=formula)
    manufacturer = guards.get_manufacturer(manufacturer_name)

    message = f"Drug '{trade_name}' already exists for manufacturer '{manufacturer_name}'."
    detail = {'entity': 'Drug', 'trade_name': trade_name, 'manufacturer': manufacturer_name}
    if guards.drug_name_taken(trade_name, manufacturer_name):
        raise DuplicateKeyError(message=message, code='DRUG_EXISTS', detail=detail)

    drug = _insert(
        Drug, 'DRUG_EXISTS', message, detail,
        trade_name=trade_name,
        formula=formula,
        manufacturer=manufacturer,
    )
    logger.info("[Service][add_drug] drug=%s (%s / %s) 已创建", drug.id, trade_name, manufacturer_name)
    return drug.id


@transaction.atomic
def update_drug(drug_id, trade_name, formula, manufacturer_name):
    validators.validate_required(trade_name=trade_name, formula=formula)
    drug = guards.get_drug(drug_id, for_update=True)
    manufacturer = guards.get_manufacturer(manufacturer_name)

    if guards.drug_name_taken(trade_name, manufacturer_name, exclude_id=drug.id):
        raise DuplicateKeyError(
            message=f"Drug '{trade_name}' already exists for manufacturer '{manufacturer_name}'.",
            code='DRUG_EXISTS',
            detail={'entity': 'Drug', 'trade_name': trade_name, 'manufacturer': manufacturer_name},
        )

    drug.trade_name = trade_name
    drug.formula = formula
    drug.manufacturer = manufacturer
    drug.save(update_fields=['trade_name', 'formula', 'manufacturer'])
    logger.info("[Service][update_drug] drug=%s 已更新", drug_id)


@transaction.atomic
def delete_drug(drug_id):
    """已开处方的药品不能删除；否则先删库存行，再删药品。"""
    drug = guards.get_drug(drug_id, for_update=True)

    if guards.drug_is_prescribed(drug_id):
        logger.warning("[Service][delete_drug] drug=%s 已开处方，拒绝删除", drug_id)
        raise DependencyExistsError(
            message=f"Cannot delete drug {drug_id}: drug is used in existing prescriptions.",
            code='DRUG_IN_PRESCRIPTION',
            detail={'entity': 'Drug', 'id': drug_id, 'dependent': 'PrescriptionLine'},
        )

    inventory, _ = InventoryItem.objects.filter(drug_id=drug_id).delete()
    drug.delete()
    logger.info("[Service][delete_drug] drug=%s 已删除，库存 %d 条", drug_id, inventory)


# ===========================================================================
# Pharmacy / Contract / Inventory
# ===========================================================================

@transaction.atomic
def add_pharmacy(name, address, phone):
    validators.validate_required(name=name, address=address, phone=phone)
    pharmacy = Pharmacy.objects.create(name=name, address=address, phone=phone)
    logger.info("[Service][add_pharmacy] pharmacy=%s (%s) 已创建", pharmacy.id, name)
    return pharmacy.id


@transaction.atomic
def update_pharmacy(pharmacy_id, name, address, phone):
    validators.validate_required(name=name, address=address, phone=phone)
    pharmacy = guards.get_pharmacy(pharmacy_id, for_update=True)

    pharmacy.name = name
    pharmacy.address = address
    pharmacy.phone = phone
    pharmacy.save(update_fields=['name', 'address', 'phone'])
    logger.info("[Service][update_pharmacy] pharmacy=%s 已更新", pharmacy_id)


@transaction.atomic
def delete_pharmacy(pharmacy_id):
    """先删库存行，再删合同，最后删药店。"""
    pharmacy = guards.get_pharmacy(pharmacy_id, for_update=True)

    inventory, _ = InventoryItem.objects.filter(pharmacy_id=pharmacy_id).delete()
    contracts, _ = Contract.objects.filter(pharmacy_id=pharmacy_id).delete()
    pharmacy.delete()
    logger.info(
        "[Service][delete_pharmacy] pharmacy=%s 已删除，库存 %d 条，合同 %d 条",
        pharmacy_id, inventory, contracts,
    )


@transaction.atomic
def add_contract(pharmacy_id, manufacturer_name, start_date, end_date, content, supervisor):
    start_date, end_date = validators.validate_contract_dates(start_date, end_date)
    validators.validate_required(content=content, supervisor=supervisor)
    pharmacy = guards.get_pharmacy(pharmacy_id)
    manufacturer = guards.get_manufacturer(manufacturer_name)

    contract = Contract.objects.create(
        pharmacy=pharmacy,
        manufacturer=manufacturer,
        start_date=start_date,
        end_date=end_date,
        content=content,
        supervisor=supervisor,
    )
    logger.info(
        "[Service][add_contract] contract=%s 已创建 (pharmacy=%s, manufacturer=%s, %s ~ %s)",
        contract.id, pharmacy_id, manufacturer_name, start_date, end_date,
    )
    return contract.id


@transaction.atomic
def update_contract(contract_id, pharmacy_id, manufacturer_name, start_date, end_date, content, supervisor):
    start_date, end_date = validators.validate_contract_dates(start_date, end_date)
    validators.validate_required(content=content, supervisor=supervisor)
    contract = guards.get_contract(contract_id, for_update=True)
    pharmacy = guards.get_pharmacy(pharmacy_id)
    manufacturer = guards.get_manufacturer(manufacturer_name)

    contract.pharmacy = pharmacy
    contract.manufacturer = manufacturer
    contract.start_date = start_date
    contract.end_date = end_date
    contract.content = content
    contract.supervisor = supervisor
    contract.save()
    logger.info("[Service][update_contract] contract=%s 已更新", contract_id)


@transaction.atomic
def update_contract_supervisor(contract_id, supervisor):
    validators.validate_required(supervisor=supervisor)
    contract = guards.get_contract(contract_id, for_update=True)

    contract.supervisor = supervisor
    contract.save(update_fields=['supervisor'])
    logger.info("[Service][update_contract_supervisor] contract=%s 负责人改为 %s", contract_id, supervisor)


@transaction.atomic
def delete_contract(contract_id):
    contract = guards.get_contract(contract_id, for_update=True)
    contract.delete()
    logger.info("[Service][delete_contract] contract=%s 已删除", contract_id)


@transaction.atomic
def add_drug_to_pharmacy(pharmacy_id, drug_id, price, stock):
    """
    药店上架药品：按 (pharmacy, drug) upsert。
    已存在则覆盖 price / stock，不报错。

    Returns:
        True 表示新插入，False 表示覆盖了已有行
    """
    price = validators.validate_inventory(price, stock)
    pharmacy = guards.get_pharmacy(pharmacy_id)
    drug = guards.get_drug(drug_id)

    _, created = InventoryItem.objects.update_or_create(
        pharmacy=pharmacy,
        drug=drug,
        defaults={'price': price, 'stock': stock},
    )
    logger.info(
        "[Service][add_drug_to_pharmacy] pharmacy=%s drug=%s price=%s stock=%d (%s)",
        pharmacy_id, drug_id, price, stock, 'insert' if created else 'overwrite',
    )
    return created


@transaction.atomic
def update_inventory(pharmacy_id, drug_id, price, stock):
    """只更新已上架的药品；未上架 → NotFoundError(INVENTORY_ITEM_NOT_FOUND)。"""
    price = validators.validate_inventory(price, stock)
    item = guards.get_inventory_item(pharmacy_id, drug_id, for_update=True)

    item.price = price
    item.stock = stock
    item.save(update_fields=['price', 'stock'])
    logger.info("[Service][update_inventory] pharmacy=%s drug=%s price=%s stock=%d", pharmacy_id, drug_id, price, stock)


@transaction.atomic
def update_drug_stock(pharmacy_id, drug_id, stock):
    errors = []
    validators.validate_stock(errors, stock)
    validators.raise_if_errors(errors)
    item = guards.get_inventory_item(pharmacy_id, drug_id, for_update=True)

    item.stock = stock
    item.save(update_fields=['stock'])
    logger.info("[Service][update_drug_stock] pharmacy=%s drug=%s stock=%d", pharmacy_id, drug_id, stock)


@transaction.atomic
def update_drug_price(pharmacy_id, drug_id, price):
    errors = []
    price = validators.validate_price(errors, price)
    validators.raise_if_errors(errors)
    item = guards.get_inventory_item(pharmacy_id, drug_id, for_update=True)

    item.price = price
    item.save(update_fields=['price'])
    logger.info("[Service][update_drug_price] pharmacy=%s drug=%s price=%s", pharmacy_id, drug_id, price)


@transaction.atomic
def remove_drug_from_pharmacy(pharmacy_id, drug_id):
    item = guards.get_inventory_item(pharmacy_id, drug_id, for_update=True)
    item.delete()
    logger.info("[Service][remove_drug_from_pharmacy] pharmacy=%s drug=%s 已下架", pharmacy_id, drug_id)


# ===========================================================================
# Prescription
# ===========================================================================

@transaction.atomic
def add_prescription(patient_id, doctor_id, prescription_date):
    """
    新建或重开处方，决策见 prescriptions.decide_prescription_action。

    同一 (patient, doctor) 不会因为本函数产生第二张处方。

    Returns:
        处方 id（新建的或已有的）
    """
    prescription_date = validators.validate_prescription_date(prescription_date)
    patient = guards.get_patient(patient_id)
    doctor = guards.get_doctor(doctor_id)

    existing = (
        Prescription.objects
        .select_for_update()
        .filter(patient=patient, doctor=doctor)
        .order_by('id')
        .first()
    )
    action = decide_prescription_action(
        existing.prescription_date if existing else None,
        prescription_date,
    )

    if action is PrescriptionAction.CREATE:
        prescription = _insert(
            Prescription, 'PRESCRIPTION_EXISTS',
            f"Prescription already exists for patient {patient_id}, doctor {doctor_id} on {prescription_date}.",
            {'entity': 'Prescription', 'patient_id': patient_id, 'doctor_id': doctor_id,
             'prescription_date': prescription_date.isoformat()},
            patient=patient,
            doctor=doctor,
            prescription_date=prescription_date,
        )
        logger.info("[Service][add_prescription] prescription=%s 已创建 (%s)", prescription.id, prescription_date)
        return prescription.id

    if action is PrescriptionAction.REISSUE:
        # 新日期更晚：处方重开，旧明细作废
        if guards.prescription_date_taken(patient_id, doctor_id, prescription_date, exclude_id=existing.id):
            logger.warning(
                "[Service][add_prescription] prescription=%s 无法重开：%s 已有同日处方",
                existing.id, prescription_date,
            )
            raise DuplicateKeyError(
                message="A prescription already exists for this patient, doctor, and date.",
                code='PRESCRIPTION_EXISTS',
                detail={
                    'entity': 'Prescription',
                    'patient_id': patient_id,
                    'doctor_id': doctor_id,
                    'prescription_date': prescription_date.isoformat(),
                },
            )
        old_date = existing.prescription_date
        lines, _ = existing.lines.all().delete()
        existing.prescription_date = prescription_date
        existing.save(update_fields=['prescription_date'])
        logger.info(
            "[Service][add_prescription] prescription=%s 重开 %s → %s，清除明细 %d 条",
            existing.id, old_date, prescription_date, lines,
        )
    else:
        logger.info(
            "[Service][add_prescription] prescription=%s 保持不变（库中 %s，提交 %s）",
            existing.id, existing.prescription_date, prescription_date,
        )
    return existing.id


@transaction.atomic
def update_prescription(prescription_id, patient_id, doctor_id, prescription_date):
    """直接修改处方；(patient, doctor, date) 不能与其他处方重复。"""
    prescription_date = validators.validate_prescription_date(prescription_date)
    prescription = guards.get_prescription(prescription_id, for_update=True)
    patient = guards.get_patient(patient_id)
    doctor = guards.get_doctor(doctor_id)

    if guards.prescription_date_taken(patient_id, doctor_id, prescription_date, exclude_id=prescription.id):
        raise DuplicateKeyError(
            message="A prescription already exists for this patient, doctor, and date.",
            code='PRESCRIPTION_EXISTS',
            detail={
                'entity': 'Prescription',
                'patient_id': patient_id,
                'doctor_id': doctor_id,
                'prescription_date': prescription_date.isoformat(),
            },
        )

    prescription.patient = patient
    prescription.doctor = doctor
    prescription.prescription_date = prescription_date
    prescription.save(update_fields=['patient', 'doctor', 'prescription_date'])
    logger.info("[Service][update_prescription] prescription=%s 已更新", prescription_id)


@transaction.atomic
def delete_prescription(prescription_id):
    """先删明细，再删处方。"""
    prescription = guards.get_prescription(prescription_id, for_update=True)

    lines, _ = prescription.lines.all().delete()
    prescription.delete()
    logger.info("[Service][delete_prescription] prescription=%s 已删除，明细 %d 条", prescription_id, lines)


@transaction.atomic
def add_drug_to_prescription(prescription_id, drug_id, quantity):
    """
    处方加药：按 (prescription, drug) upsert，重复提交覆盖 quantity。

    Returns:
        True 表示新插入，False 表示覆盖了已有行
    """
    validators.validate_quantity(quantity)
    prescription = guards.get_prescription(prescription_id)
    drug = guards.get_drug(drug_id)

    _, created = PrescriptionLine.objects.update_or_create(
        prescription=prescription,
        drug=drug,
        defaults={'quantity': quantity},
    )
    logger.info(
        "[Service][add_drug_to_prescription] prescription=%s drug=%s quantity=%d (%s)",
        prescription_id, drug_id, quantity, 'insert' if created else 'overwrite',
    )
    return created


@transaction.atomic
def update_prescription_line(prescription_id, drug_id, quantity):
    validators.validate_quantity(quantity)
    line = guards.get_prescription_line(prescription_id, drug_id, for_update=True)

    line.quantity = quantity
    line.save(update_fields=['quantity'])
    logger.info(
        "[Service][update_prescription_line] prescription=%s drug=%s quantity=%d",
        prescription_id, drug_id, quantity,
    )


@transaction.atomic
def remove_drug_from_prescription(prescription_id, drug_id):
    """
    从处方删除一个药品；删掉最后一条明细时处方本身也一起删除。

    Returns:
        True 表示处方已被一并删除
    """
    prescription = guards.get_prescription(prescription_id, for_update=True)
    line = guards.get_prescription_line(prescription_id, drug_id)
    line.delete()

    if guards.count_prescription_lines(prescription_id) > 0:
        logger.info("[Service][remove_drug_from_prescription] prescription=%s 移除 drug=%s", prescription_id, drug_id)
        return False

    prescription.delete()
    logger.info(
        "[Service][remove_drug_from_prescription] prescription=%s 最后一条明细已移除，处方一并删除",
        prescription_id,
    )
    return True
