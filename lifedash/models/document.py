# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from datetime import datetime
import pytz
from lifedash.models.database import Base
from lifedash.utils.encryption import EncryptedJSON  # 🔐 Encryption utils


def _utcnow():
    return datetime.now(pytz.utc)


class Document(Base):
    __tablename__ = "documents"
    __table_args__ = (UniqueConstraint("collection", "doc_id", name="uq_collection_doc"),)

    # Insertion sequence, used as the tie-breaker when ordering snapshots
    seq = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String, nullable=False, index=True)
    doc_id = Column(String, nullable=False, index=True)

    payload = Column(EncryptedJSON, nullable=False)     # 🔐 Encrypted when configured

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<Document {self.collection}/{self.doc_id}>"
