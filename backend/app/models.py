from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .database import Base


class College(Base):
    """A college program or ECNL club. The table name predates the clubs."""

    __tablename__ = "colleges"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String)
    division: Mapped[str] = mapped_column(String, index=True)
    conference: Mapped[Optional[str]] = mapped_column(String)
    city: Mapped[Optional[str]] = mapped_column(String)
    state: Mapped[Optional[str]] = mapped_column(String)
    region: Mapped[Optional[str]] = mapped_column(String)
    lat: Mapped[Optional[float]] = mapped_column(Float)
    lng: Mapped[Optional[float]] = mapped_column(Float)
    website: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[str]] = mapped_column(String, server_default=func.current_timestamp())
    updated_at: Mapped[Optional[str]] = mapped_column(String)

    coaches: Mapped[List["Coach"]] = relationship(
        "Coach",
        back_populates="college",
        cascade="all, delete-orphan",
        order_by="Coach.id",
    )


class Coach(Base):
    __tablename__ = "coaches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    college_id: Mapped[str] = mapped_column(ForeignKey("colleges.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String)
    title: Mapped[Optional[str]] = mapped_column(String)
    email: Mapped[Optional[str]] = mapped_column(String)
    phone: Mapped[Optional[str]] = mapped_column(String)
    created_at: Mapped[Optional[str]] = mapped_column(String, server_default=func.current_timestamp())

    college: Mapped[College] = relationship("College", back_populates="coaches")
