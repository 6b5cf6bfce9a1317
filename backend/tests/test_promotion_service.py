import pytest

from app.core.errors import NotFound, PermissionDenied, ValidationError
from app.models.promotion import Promotion, PromotionStatus
from app.models.user import User
from app.schemas.promotion import PromotionInput
from app.services.permissions import UserPermissionChecker
from app.services.promotion_service import PromotionService
from app.services.promotion_store import PromotionStore


def make_service(db):
    return PromotionService(PromotionStore(db), UserPermissionChecker(db))


def promo_input(**overrides):
    data = {
        "title": "Dia del Padre",
        "description": "Comprale a tu papa lo que siempre ha querido!",
        "redirectLink": "http://x",
    }
    data.update(overrides)
    return PromotionInput(**data)


def test_create_then_read_returns_same_fields(db):
    service = make_service(db)

    promo_id = service.create("admin-1", promo_input())
    out = service.read(promo_id)

    assert out.model_dump(by_alias=True) == {
        "id": promo_id,
        "title": "Dia del Padre",
        "description": "Comprale a tu papa lo que siempre ha querido!",
        "redirectLink": "http://x",
        "imageId": "",
    }
    row = db.get(Promotion, promo_id)
    assert row.owner_id == "admin-1"
    assert row.enabled is True


def test_create_trims_text_fields(db):
    service = make_service(db)

    promo_id = service.create("admin-1", promo_input(title="  Navidad  ", imageId=" img-1 "))

    out = service.read(promo_id)
    assert out.title == "Navidad"
    assert out.image_id == "img-1"


@pytest.mark.parametrize("user_id", ["user-1", "ghost"])
def test_create_without_admin_writes_nothing(db, user_id):
    service = make_service(db)

    with pytest.raises(PermissionDenied):
        service.create(user_id, promo_input())

    assert db.query(Promotion).count() == 0


def test_permission_checked_before_validation(db):
    """A non-admin with a broken body gets the permission error, not the report."""
    service = make_service(db)

    with pytest.raises(PermissionDenied):
        service.create("user-1", PromotionInput())


def test_missing_fields_reported_together(db):
    service = make_service(db)

    with pytest.raises(ValidationError) as exc:
        service.create("admin-1", PromotionInput(title="ok", description="   "))

    assert exc.value.paths == ["description", "redirectLink"]
    assert db.query(Promotion).count() == 0


def test_all_missing_fields_reported_in_order(db):
    service = make_service(db)

    with pytest.raises(ValidationError) as exc:
        service.create("admin-1", PromotionInput())

    assert exc.value.paths == ["title", "description", "redirectLink"]


def test_list_excludes_invalidated(db):
    service = make_service(db)
    keep = service.create("admin-1", promo_input(title="Keep"))
    gone = service.create("admin-1", promo_input(title="Gone"))

    service.invalidate("admin-1", gone)

    assert [p.id for p in service.list()] == [keep]


def test_invalidated_promotion_is_still_readable(db):
    service = make_service(db)
    promo_id = service.create("admin-1", promo_input())

    service.invalidate("admin-1", promo_id)

    assert service.read(promo_id).id == promo_id


def test_invalidate_is_idempotent(db):
    service = make_service(db)
    promo_id = service.create("admin-1", promo_input())

    service.invalidate("admin-1", promo_id)
    service.invalidate("admin-1", promo_id)

    assert db.get(Promotion, promo_id).status == PromotionStatus.INVALIDATED


def test_invalidate_requires_admin(db):
    service = make_service(db)
    promo_id = service.create("admin-1", promo_input())

    with pytest.raises(PermissionDenied):
        service.invalidate("user-1", promo_id)

    assert db.get(Promotion, promo_id).enabled is True


def test_invalidate_unknown_id(db):
    with pytest.raises(NotFound):
        make_service(db).invalidate("admin-1", "nonexistent")


def test_read_nonexistent(db):
    with pytest.raises(NotFound):
        make_service(db).read("nonexistent")


def test_update_keeps_owner_and_id(db):
    service = make_service(db)
    promo_id = service.create("admin-1", promo_input())
    db.add(User(id="admin-2", permissions=["admin"]))
    db.commit()

    same_id = service.create("admin-2", promo_input(id=promo_id, title="Nuevo titulo"))

    assert same_id == promo_id
    row = db.get(Promotion, promo_id)
    assert row.title == "Nuevo titulo"
    assert row.owner_id == "admin-1"
    assert db.query(Promotion).count() == 1


def test_update_cannot_revive_invalidated(db):
    service = make_service(db)
    promo_id = service.create("admin-1", promo_input())
    service.invalidate("admin-1", promo_id)

    service.create("admin-1", promo_input(id=promo_id, enabled=True))

    assert db.get(Promotion, promo_id).enabled is False


def test_update_unknown_id_is_not_found(db):
    with pytest.raises(NotFound):
        make_service(db).create("admin-1", promo_input(id="nonexistent"))
    assert db.query(Promotion).count() == 0


def test_create_disabled(db):
    service = make_service(db)

    promo_id = service.create("admin-1", promo_input(enabled=False))

    assert service.list() == []
    assert service.read(promo_id).id == promo_id


class RecordingChecker:
    def __init__(self, allow):
        self.allow = allow
        self.calls = []

    def require(self, user_id, role):
        self.calls.append((user_id, role))
        if not self.allow:
            raise PermissionDenied(user_id, role)


def test_injected_checker_is_asked_for_admin_role(db):
    checker = RecordingChecker(allow=True)
    service = PromotionService(PromotionStore(db), checker)

    promo_id = service.create("admin-1", promo_input())
    service.invalidate("admin-1", promo_id)

    assert checker.calls == [("admin-1", "admin"), ("admin-1", "admin")]


def test_denying_checker_blocks_both_mutations(db):
    service = make_service(db)
    promo_id = service.create("admin-1", promo_input())
    denied = PromotionService(PromotionStore(db), RecordingChecker(allow=False))

    with pytest.raises(PermissionDenied):
        denied.create("admin-1", promo_input(title="Otra"))
    with pytest.raises(PermissionDenied):
        denied.invalidate("admin-1", promo_id)

    assert db.query(Promotion).count() == 1
    assert db.get(Promotion, promo_id).enabled is True
