# Healthcare: patients and their prescriptions

from datetime import datetime, timedelta
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from utils.helpers import format_short_date

T = TypeVar("T")


class Repository(Generic[T]):
    """
    A plain list of records searched with a predicate.
    """
    def __init__(self):
        self._items: List[T] = []

    def add(self, item: T):
        self._items.append(item)

    def get_all(self) -> List[T]:
        return list(self._items)

    def get_by_id(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self._items if predicate(item)), None)

    def remove(self, predicate: Callable[[T], bool]) -> bool:
        item = self.get_by_id(predicate)
        if item is None:
            return False
        self._items.remove(item)
        return True


class Patient:
    def __init__(self, id: int, name: str, age: int, gender: str):
        self.id = id
        self.name = name
        self.age = age
        self.gender = gender

    def __repr__(self):
        return f"Patient(id={self.id}, name='{self.name}', age={self.age}, gender='{self.gender}')"


class Prescription:
    def __init__(self, id: int, patient_id: int, medication: str, date_issued: datetime):
        self.id = id
        self.patient_id = patient_id
        self.medication = medication
        self.date_issued = date_issued

    def __repr__(self):
        return f"Prescription(id={self.id}, patient_id={self.patient_id}, medication='{self.medication}')"


class HealthcareApp:
    def __init__(self):
        self.patients: Repository[Patient] = Repository()
        self.prescriptions: Repository[Prescription] = Repository()
        self._patient_prescriptions: Dict[int, List[Prescription]] = {}

    def seed_data(self, now=None):
        now = now or datetime.now()
        self.patients.add(Patient(1, "Kevin Heart", 46, "Male"))
        self.patients.add(Patient(2, "Sarah Connor", 60, "Female"))
        self.patients.add(Patient(3, "Kylian Mbappé", 26, "Male"))

        self.prescriptions.add(Prescription(1, 1, "Gentamicin", now - timedelta(days=10)))
        self.prescriptions.add(Prescription(2, 2, "Trisilicate", now - timedelta(days=5)))
        self.prescriptions.add(Prescription(3, 2, "Ibuprofen", now - timedelta(days=2)))
        self.prescriptions.add(Prescription(4, 3, "Paracetamol", now - timedelta(days=15)))
        self.prescriptions.add(Prescription(5, 3, "Metformin", now - timedelta(days=7)))

    def build_prescription_map(self):
        self._patient_prescriptions = {}
        for prescription in self.prescriptions.get_all():
            self._patient_prescriptions.setdefault(prescription.patient_id, []).append(prescription)

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        return list(self._patient_prescriptions.get(patient_id, []))

    def print_all_patients(self):
        print("Patients:")
        for patient in self.patients.get_all():
            print(f"ID: {patient.id}, Name: {patient.name}, Age: {patient.age}, Gender: {patient.gender}")

    def print_prescriptions_for_patient(self, patient_id: int):
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            print(f"No prescriptions found for patient ID {patient_id}.")
            return
        print(f"Prescriptions for patient ID {patient_id}:")
        for prescription in prescriptions:
            print(f"ID: {prescription.id}, Medication: {prescription.medication}, "
                  f"Date: {format_short_date(prescription.date_issued)}")


if __name__ == "__main__":
    app = HealthcareApp()
    app.seed_data()
    app.build_prescription_map()
    app.print_all_patients()
    app.print_prescriptions_for_patient(2)
