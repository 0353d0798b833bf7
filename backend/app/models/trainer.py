from datetime import datetime
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, ForeignKey, DateTime, UniqueConstraint, func, Enum as SAEnum
from app.db import Base

class LinkStatus(str, Enum):
    pending = "pending"
    active = "active"
    inactive = "inactive"
    rejected = "rejected"

class TrainerClientLink(Base):
    __tablename__ = "trainer_client_links"
    __table_args__ = (UniqueConstraint("trainer_id", "client_id", name="uq_trainer_client"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    client_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    status: Mapped[LinkStatus] = mapped_column(
        SAEnum(LinkStatus, name="link_status"),
        nullable=False,
        server_default=LinkStatus.pending.value,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
