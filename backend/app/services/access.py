"""Who may log, read and change whose sessions.

Policy, applied to sessions and everything under them:

- creating or listing for yourself is always allowed; for someone else only
  with an *active* trainer-client link (otherwise 403)
- an existing session is visible to its athlete and to whoever created it;
  reads by anyone else look like a missing row (404), mutations by anyone
  else are refused (403)
"""
import logging

from sqlalchemy.orm import Session

from app.errors import Forbidden, NotFound
from app.models import WorkoutSession
from app.repositories.trainer_repo import TrainerClientRepository

log = logging.getLogger("uvicorn")


class AccessPolicy:
    def __init__(self, db: Session):
        self.links = TrainerClientRepository(db)

    def can_act_for(self, actor_id: int, target_user_id: int) -> bool:
        if actor_id == target_user_id:
            return True
        return self.links.is_active_client(trainer_id=actor_id, client_id=target_user_id)

    def ensure_can_act_for(self, actor_id: int, target_user_id: int, action: str) -> None:
        if not self.can_act_for(actor_id, target_user_id):
            log.warning("denied: user=%s %s for user=%s (no active client link)",
                        actor_id, action, target_user_id)
            raise Forbidden(f"Not authorized to {action} for this user")

    @staticmethod
    def has_session_access(sess: WorkoutSession, actor_id: int) -> bool:
        return sess.user_id == actor_id or sess.created_by_id == actor_id

    def ensure_readable(self, sess: WorkoutSession | None, actor_id: int, what: str) -> None:
        if sess is None or not self.has_session_access(sess, actor_id):
            raise NotFound(f"{what} not found")

    def ensure_mutable(self, sess: WorkoutSession | None, actor_id: int, what: str, action: str) -> None:
        if sess is None:
            raise NotFound(f"{what} not found")
        if not self.has_session_access(sess, actor_id):
            log.warning("denied: user=%s %s %s of session=%s", actor_id, action, what.lower(), sess.id)
            raise Forbidden(f"Not authorized to {action} this {what.lower()}")
