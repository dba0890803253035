import pytest

from fakes import ADMIN_TOKEN, bearer
from nightlife.app.repositories import admins, staff
from nightlife.app.schemas.staff import StaffProfile


@pytest.fixture
def bartender(identity, store):
    uid = identity.add_account("bar@club.test", "Bea")
    staff.save_profile(store, StaffProfile(uid=uid, name="Bea", role="bartender"))
    store.writes.clear()
    return uid


def test_remove_staff_member(client, admin_uid, bartender, identity, store):
    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": bartender})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": f"User {bartender} has been removed."}
    assert bartender not in identity.accounts
    assert store.get("staff", bartender) is None
    assert not admins.is_admin(store, bartender)
    # admin record was absent, so only the staff profile is deleted
    assert store.writes == [("delete", "staff", bartender)]


def test_remove_also_drops_admin_record(client, admin_uid, bartender, identity, store):
    admins.grant(store, bartender)

    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": bartender})

    assert response.status_code == 200
    assert not admins.is_admin(store, bartender)
    assert admins.is_admin(store, admin_uid)


def test_remove_without_profile_is_ok(client, admin_uid, identity, store):
    uid = identity.add_account("ghost@club.test")

    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": uid})

    assert response.status_code == 200
    assert uid not in identity.accounts


def test_cannot_remove_self(client, admin_uid, identity, store):
    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": admin_uid})

    assert response.status_code == 400
    assert response.json() == {"error": "You cannot remove yourself."}
    assert admin_uid in identity.accounts
    assert identity.deleted == []
    assert store.writes == []


def test_unknown_target_returns_404(client, admin_uid, identity, store):
    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": "nobody"})

    assert response.status_code == 404
    assert response.json() == {"error": "User to remove not found in Authentication."}
    assert store.writes == []


@pytest.mark.parametrize("body", [{}, {"uidToRemove": ""}, {"uidToRemove": None}, {"uid": "x"}])
def test_missing_uid_returns_400(client, admin_uid, identity, body):
    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing uidToRemove field."}
    assert identity.deleted == []


def test_auth_delete_failure_returns_500(client, admin_uid, bartender, identity, store):
    identity.delete_error = RuntimeError("auth unavailable")

    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": bartender})

    assert response.status_code == 500
    assert store.writes == []
    assert store.get("staff", bartender) is not None


def test_cleanup_failure_after_auth_delete_returns_500(client, admin_uid, bartender, identity, store):
    store.fail_writes_to.add("staff")

    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": bartender})

    assert response.status_code == 500
    # no rollback: the auth account is already gone
    assert bartender not in identity.accounts


def test_admin_cleanup_runs_when_profile_cleanup_fails(client, admin_uid, bartender, identity, store):
    admins.grant(store, bartender)
    store.fail_writes_to.add("staff")

    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": bartender})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert not admins.is_admin(store, bartender)
    assert store.get("staff", bartender) is not None


def test_profile_cleanup_kept_when_admin_cleanup_fails(client, admin_uid, bartender, identity, store, settings):
    settings.admins_collection = "managers"
    store.collections["managers"][bartender] = {"adminId": bartender}
    # the caller's own admin record must live in the configured collection too
    store.collections["managers"][admin_uid] = {"adminId": admin_uid}
    store.fail_writes_to.add("managers")

    response = client.post("/removeStaffMember", headers=bearer(ADMIN_TOKEN), json={"uidToRemove": bartender})

    assert response.status_code == 500
    assert store.get("staff", bartender) is None
    assert bartender not in identity.accounts
