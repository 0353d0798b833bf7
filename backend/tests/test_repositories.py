from app.db import SessionLocal
from app.models import LinkStatus
from app.repositories.user_repo import UserRepository
from app.repositories.trainer_repo import TrainerClientRepository
from sqlalchemy.exc import IntegrityError
import uuid, pytest

def test_user_repo_create_and_get():
    db = SessionLocal()
    repo = UserRepository(db)
    email = f"{uuid.uuid4().hex[:8]}@ex.com"
    u = repo.create(email=email, name="Repo")
    db.commit()
    assert u.id and u.email == email
    assert repo.get(u.id).email == email
    assert repo.get_by_email(email.upper()).id == u.id
    db.close()

def test_user_repo_duplicate_email_rejected_on_flush():
    db = SessionLocal()
    repo = UserRepository(db)
    email = f"{uuid.uuid4().hex[:8]}@ex.com"
    repo.create(email=email, name="A")
    db.commit()
    with pytest.raises(IntegrityError):
        repo.create(email=email, name="B")
    db.rollback()
    assert repo.get_by_email(email).name == "A"
    db.close()

def test_user_repo_create_leaves_commit_to_caller():
    db = SessionLocal()
    repo = UserRepository(db)
    email = f"{uuid.uuid4().hex[:8]}@ex.com"
    assert repo.create(email=email, name="Pending").id
    db.rollback()
    assert repo.get_by_email(email) is None
    db.close()

def test_trainer_link_upsert():
    db = SessionLocal()
    users = UserRepository(db)
    trainer = users.create(email=f"{uuid.uuid4().hex[:8]}@ex.com", name="T")
    athlete = users.create(email=f"{uuid.uuid4().hex[:8]}@ex.com", name="C")
    links = TrainerClientRepository(db)

    assert links.get_link(trainer.id, athlete.id) is None
    links.set_status(trainer.id, athlete.id, LinkStatus.pending)
    assert not links.is_active_client(trainer.id, athlete.id)
    link = links.set_status(trainer.id, athlete.id, LinkStatus.active)
    db.commit()
    assert links.is_active_client(trainer.id, athlete.id)
    # direction matters
    assert not links.is_active_client(athlete.id, trainer.id)
    assert links.get_link(trainer.id, athlete.id).id == link.id
    db.close()
