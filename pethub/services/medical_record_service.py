"""Medical record service."""
from sqlmodel import Session, select
from typing import List, Optional
from datetime import datetime

from pethub.models.medical_record import MedicalRecord
from pethub.utils.datetime_utils import to_naive_utc


class MedicalRecordService:
    """Service class for medical records, scoped to the owner."""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        user_id: int,
        pet_id: int,
        diagnose: str,
        vet_name: str,
        medication: str,
        description: str,
        date: datetime
    ) -> MedicalRecord:
        record = MedicalRecord(
            user_id=user_id,
            pet_id=pet_id,
            diagnose=diagnose,
            vet_name=vet_name,
            medication=medication,
            description=description,
            date=to_naive_utc(date),
        )
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def get_by_user(self, user_id: int, pet_id: Optional[int] = None) -> List[MedicalRecord]:
        """Records for the user, newest visit first."""
        statement = select(MedicalRecord).where(MedicalRecord.user_id == user_id)
        if pet_id is not None:
            statement = statement.where(MedicalRecord.pet_id == pet_id)
        statement = statement.order_by(MedicalRecord.date.desc())
        return list(self.session.exec(statement).all())

    def get_by_id(self, record_id: int, user_id: int) -> Optional[MedicalRecord]:
        statement = (
            select(MedicalRecord)
            .where(MedicalRecord.id == record_id)
            .where(MedicalRecord.user_id == user_id)
        )
        return self.session.exec(statement).first()

    def update(
        self,
        record_id: int,
        user_id: int,
        diagnose: str,
        vet_name: str,
        medication: str,
        description: str,
        date: datetime
    ) -> Optional[MedicalRecord]:
        record = self.get_by_id(record_id, user_id)
        if not record:
            return None

        record.diagnose = diagnose
        record.vet_name = vet_name
        record.medication = medication
        record.description = description
        record.date = to_naive_utc(date)

        self.session.commit()
        self.session.refresh(record)
        return record

    def delete(self, record_id: int, user_id: int) -> bool:
        record = self.get_by_id(record_id, user_id)
        if not record:
            return False

        self.session.delete(record)
        self.session.commit()
        return True
