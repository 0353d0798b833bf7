from __future__ import annotations
from typing import Optional

from sqlalchemy import select

from app.models import TrainerClientLink, LinkStatus
from app.repositories.base import BaseRepository

class TrainerClientRepository(BaseRepository[TrainerClientLink]):
    model = TrainerClientLink

    def get_link(self, trainer_id: int, client_id: int) -> Optional[TrainerClientLink]:
        stmt = select(TrainerClientLink).where(
            TrainerClientLink.trainer_id == trainer_id,
            TrainerClientLink.client_id == client_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def is_active_client(self, trainer_id: int, client_id: int) -> bool:
        link = self.get_link(trainer_id, client_id)
        return link is not None and link.status == LinkStatus.active

    def set_status(self, trainer_id: int, client_id: int, status: LinkStatus) -> TrainerClientLink:
        """Upsert the link; the invitation flow that drives this lives elsewhere."""
        link = self.get_link(trainer_id, client_id)
        if link is None:
            link = TrainerClientLink(trainer_id=trainer_id, client_id=client_id, status=status)
            return self.add_and_refresh(link)
        link.status = status
        self.db.flush()
        return link
