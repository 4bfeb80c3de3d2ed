from django.db import models
from django.db.models import F, Q


class Doctor(models.Model):
    national_id = models.CharField(max_length=12, primary_key=True)
    name = models.CharField(max_length=100)
    specialty = models.CharField(max_length=100)
    years_of_experience = models.IntegerField()

    class Meta:
        db_table = 'doctors'
        ordering = ['name']
        constraints = [
            models.CheckConstraint(
                condition=Q(years_of_experience__gte=0),
                name='ck_doctor_experience_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.national_id})"


class Patient(models.Model):
    national_id = models.CharField(max_length=12, primary_key=True)
    name = models.CharField(max_length=100)
    address = models.CharField(max_length=255)
    age = models.IntegerField()
    # 删除医生前必须先处理病人，见 guards.doctor_has_patients
    primary_physician = models.ForeignKey(
        Doctor,
        on_delete=models.PROTECT,
        related_name='patients',
    )

    class Meta:
        db_table = 'patients'
        ordering = ['name']
        constraints = [
            models.CheckConstraint(condition=Q(age__gt=0), name='ck_patient_age_positive'),
        ]

    def __str__(self):
        return f"{self.name} ({self.national_id})"


class Manufacturer(models.Model):
    name = models.CharField(max_length=100, primary_key=True)
    phone = models.CharField(max_length=15)

    class Meta:
        db_table = 'manufacturers'
        ordering = ['name']

    def __str__(self):
        return self.name


class Pharmacy(models.Model):
    name = models.CharField(max_length=100)
    address = models.CharField(max_length=255)
    phone = models.CharField(max_length=15)

    class Meta:
        db_table = 'pharmacies'
        ordering = ['id']
        verbose_name_plural = 'pharmacies'

    def __str__(self):
        return self.name


class Drug(models.Model):
    trade_name = models.CharField(max_length=100)
    formula = models.CharField(max_length=255)
    # 唯一由存储层级联删除的外键：删除厂商时一并删除其药品
    manufacturer = models.ForeignKey(
        Manufacturer,
        on_delete=models.CASCADE,
        related_name='drugs',
    )

    class Meta:
        db_table = 'drugs'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['trade_name', 'manufacturer'],
                name='uq_drug_trade_name_manufacturer',
            ),
        ]

    def __str__(self):
        return f"{self.trade_name} ({self.manufacturer_id})"


class Contract(models.Model):
    pharmacy = models.ForeignKey(Pharmacy, on_delete=models.PROTECT, related_name='contracts')
    manufacturer = models.ForeignKey(Manufacturer, on_delete=models.PROTECT, related_name='contracts')
    start_date = models.DateField()
    end_date = models.DateField()
    content = models.TextField()
    supervisor = models.CharField(max_length=100)

    class Meta:
        db_table = 'contracts'
        ordering = ['id']
        constraints = [
            models.CheckConstraint(
                condition=Q(end_date__gt=F('start_date')),
                name='ck_contract_end_after_start',
            ),
        ]


class InventoryItem(models.Model):
    """Pharmacy × Drug association: one row per pair, upserted on add."""

    pharmacy = models.ForeignKey(Pharmacy, on_delete=models.PROTECT, related_name='inventory_items')
    drug = models.ForeignKey(Drug, on_delete=models.PROTECT, related_name='inventory_items')
    price = models.DecimalField(max_digits=10, decimal_places=2)
    stock = models.IntegerField(default=0)

    class Meta:
        db_table = 'pharmacy_drugs'
        ordering = ['pharmacy_id', 'drug_id']
        constraints = [
            models.UniqueConstraint(fields=['pharmacy', 'drug'], name='uq_inventory_pharmacy_drug'),
            models.CheckConstraint(condition=Q(price__gt=0), name='ck_inventory_price_positive'),
            models.CheckConstraint(condition=Q(stock__gte=0), name='ck_inventory_stock_non_negative'),
        ]


class Prescription(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name='prescriptions')
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name='prescriptions')
    prescription_date = models.DateField()

    class Meta:
        db_table = 'prescriptions'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['patient', 'doctor', 'prescription_date'],
                name='uq_prescription_patient_doctor_date',
            ),
        ]


class PrescriptionLine(models.Model):
    """Prescription × Drug association: one row per pair, upserted on add."""

    prescription = models.ForeignKey(Prescription, on_delete=models.PROTECT, related_name='lines')
    drug = models.ForeignKey(Drug, on_delete=models.PROTECT, related_name='prescription_lines')
    quantity = models.IntegerField()

    class Meta:
        db_table = 'prescription_details'
        ordering = ['prescription_id', 'drug_id']
        constraints = [
            models.UniqueConstraint(fields=['prescription', 'drug'], name='uq_prescription_line_drug'),
            models.CheckConstraint(condition=Q(quantity__gt=0), name='ck_prescription_line_quantity_positive'),
        ]
