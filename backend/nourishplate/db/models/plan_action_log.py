"""Audit trail for meal plan lifecycle mutations."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Column, DateTime, Index, String, Text, func
from sqlalchemy.dialects.postgresql import UUID

from nourishplate.db.base import Base
from nourishplate.db.types import JSONBCompat


class PlanActionLog(Base):
    __tablename__ = "plan_action_logs"
    __table_args__ = (Index("ix_plan_action_logs_subject_id", "subject_id"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    subject_id = Column(UUID(as_uuid=True), nullable=False)
    # No FK: log rows outlive deleted plans.
    plan_id = Column(UUID(as_uuid=True), nullable=True)
    action_type = Column(String(length=50), nullable=False)
    action_payload = Column(JSONBCompat, nullable=True)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
