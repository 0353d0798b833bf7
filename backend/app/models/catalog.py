"""Read-only lookup tables owned by the catalog service.

The tracking core only ever resolves these by id.
"""
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text
from app.db import Base

class Exercise(Base):
    __tablename__ = "exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    slug: Mapped[str] = mapped_column(String(120), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

class RPEScaleValue(Base):
    __tablename__ = "rpe_scale_values"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    label: Mapped[str] = mapped_column(String(60), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
