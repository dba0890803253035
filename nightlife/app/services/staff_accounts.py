import logging

from nightlife.app.core.errors import Conflict, InternalError, InvalidArgument, NotFound
from nightlife.app.core.identity import AccountNotFound, EmailAlreadyExists
from nightlife.app.repositories import admins, staff
from nightlife.app.schemas.staff import StaffCreateRequest, StaffProfile

logger = logging.getLogger("nightlife.staff")


def create_staff(
    identity,
    store,
    payload: StaffCreateRequest,
    staff_collection: str = staff.COL,
    rollback_on_failure: bool = False,
) -> StaffProfile:
    """
    1) Firebase Auth hesabı açar (displayName = name).
    2) `staff/{uid}` profilini yazar.
    İki adım atomik değil: 2. adım patlarsa Auth hesabı kalır
    (rollback_on_failure açıksa silinmeye çalışılır).
    """
    try:
        uid = identity.create_account(payload.email, payload.password, payload.name)
    except EmailAlreadyExists:
        raise Conflict()

    profile = StaffProfile(uid=uid, name=payload.name, role=payload.role)
    try:
        staff.save_profile(store, profile, staff_collection)
    except Exception:
        if rollback_on_failure:
            _rollback_account(identity, uid)
        raise

    logger.info("Staff user %s created with role %s", uid, payload.role)
    return profile


def _rollback_account(identity, uid: str) -> None:
    try:
        identity.delete_account(uid)
        logger.warning("Rolled back account %s after failed profile write", uid)
    except Exception:
        logger.exception("Rollback of account %s failed; auth and staff are out of sync", uid)


def remove_staff(
    identity,
    store,
    caller_uid: str,
    uid_to_remove: str,
    staff_collection: str = staff.COL,
    admins_collection: str = admins.COL,
) -> None:
    """
    Auth hesabını siler, ardından staff profilini ve (varsa) admin kaydını temizler.
    Temizlik adımları Auth silme başarılı olduktan sonra koşulsuz çalışır;
    biri patlasa da diğeri denenir, sonra InternalError fırlatılır.
    """
    if uid_to_remove == caller_uid:
        raise InvalidArgument("You cannot remove yourself.")

    try:
        identity.delete_account(uid_to_remove)
    except AccountNotFound:
        raise NotFound("User to remove not found in Authentication.")

    failed = []
    try:
        staff.delete_profile(store, uid_to_remove, staff_collection)
    except Exception as exc:
        logger.exception("Staff profile cleanup for %s failed", uid_to_remove)
        failed.append(exc)
    try:
        if admins.revoke_if_present(store, uid_to_remove, admins_collection):
            logger.info("Admin record for %s removed", uid_to_remove)
    except Exception as exc:
        logger.exception("Admin record cleanup for %s failed", uid_to_remove)
        failed.append(exc)

    if failed:
        raise InternalError() from failed[0]

    logger.info("Staff user %s removed by %s", uid_to_remove, caller_uid)
