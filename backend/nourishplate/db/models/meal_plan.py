"""Persisted meal plan ORM model."""
from __future__ import annotations

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text, false, func, text
from sqlalchemy.dialects.postgresql import UUID

from nourishplate.db.base import Base
from nourishplate.db.types import JSONBCompat


class MealPlanRecord(Base):
    __tablename__ = "meal_plans"
    __table_args__ = (
        Index("ix_meal_plans_subject_id", "subject_id"),
        # At most one active plan per subject.
        Index(
            "uq_meal_plans_active_subject",
            "subject_id",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active = 1"),
        ),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    subject_id = Column(UUID(as_uuid=True), nullable=False)
    subject_type = Column(String(length=20), nullable=False, server_default="kid")
    created_by = Column(UUID(as_uuid=True), nullable=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, server_default="")
    duration = Column(Integer, nullable=False)
    plan_data = Column(JSONBCompat, nullable=False)
    preferences = Column(JSONBCompat, nullable=False)
    source = Column(String(length=20), nullable=False, server_default="ai")
    is_active = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
