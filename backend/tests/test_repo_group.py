import uuid
import pytest

from fittrack.db import SessionLocal
from fittrack.models import GroupMember
from fittrack.repositories import group_repo
from fittrack.repositories.group_repo import GroupRepository
from fittrack.repositories.user_repo import UserRepository
from fittrack.settings import get_settings


def new_user(db):
    return UserRepository(db).create(email=f"{uuid.uuid4().hex[:8]}@ex.com", name="R", password_hash="")

def code_sequence(monkeypatch, codes):
    it = iter(codes)
    monkeypatch.setattr(group_repo, "generate_group_code", lambda: next(it))

def free_code(repo):
    while True:
        code = group_repo.generate_group_code()
        if repo.get_by_code(code) is None:
            return code


def test_colliding_code_is_regenerated(monkeypatch):
    with SessionLocal() as db:
        repo = GroupRepository(db)
        owner = new_user(db)
        taken = repo.create(name="First", created_by=owner.id).code
        fresh = free_code(repo)

        code_sequence(monkeypatch, [taken, taken, fresh])
        g = repo.create(name="Second", created_by=owner.id)
        assert g.code == fresh
        assert [m.user_id for m in g.members] == [owner.id]

def test_exhausted_attempts_raise(monkeypatch):
    with SessionLocal() as db:
        repo = GroupRepository(db)
        owner = new_user(db)
        taken = repo.create(name="First", created_by=owner.id).code

        monkeypatch.setattr(group_repo, "generate_group_code", lambda: taken)
        with pytest.raises(ValueError, match="group_code_exhausted"):
            repo.create(name="Second", created_by=owner.id)

def test_exhausted_attempts_map_to_503(monkeypatch):
    from fastapi.testclient import TestClient
    from fittrack.main import app
    client = TestClient(app)

    e, pwd = f"{uuid.uuid4().hex[:8]}@ex.com", "StrongPassw0rd!"
    client.post("/auth/register", json={"email": e, "name": "R", "password": pwd})
    H = {"Authorization": f"Bearer {client.post('/auth/login', json={'email': e, 'password': pwd}).json()['access_token']}"}
    taken = client.post("/groups", headers=H, json={"name": "First"}).json()["code"]

    monkeypatch.setattr(group_repo, "generate_group_code", lambda: taken)
    r = client.post("/groups", headers=H, json={"name": "Second"})
    assert r.status_code == 503

def test_attempts_bound_comes_from_settings():
    assert get_settings().GROUP_CODE_MAX_ATTEMPTS >= 1

def test_join_is_idempotent():
    with SessionLocal() as db:
        repo = GroupRepository(db)
        owner, other = new_user(db), new_user(db)
        g = repo.create(name="Crew", created_by=owner.id)
        repo.join(g, other.id)
        repo.join(g, other.id)
        assert [m.user_id for m in g.members] == [owner.id, other.id]
        assert repo.is_member(g, other.id)
        assert repo.get_by_code(g.code.lower()).id == g.id

def test_join_losing_a_race_stays_idempotent():
    with SessionLocal() as db:
        repo = GroupRepository(db)
        owner, other = new_user(db), new_user(db)
        g = repo.create(name="Crew", created_by=owner.id)
        assert not repo.is_member(g, other.id)

        # another request inserts the same membership behind this session's back
        with SessionLocal() as racer:
            racer.add(GroupMember(group_id=g.id, user_id=other.id))
            racer.commit()

        g = repo.join(g, other.id)
        assert [m.user_id for m in g.members] == [owner.id, other.id]
