"""
# `nightlife/app/routers/staff.py` - Personel Yönetimi Dokümantasyonu

## Genel Bilgi
Bu dosya, admin kullanıcıların personel hesabı açıp silebildiği iki endpoint'i içerir.
Her iki işlem de `require_admin` bağımlılığı ile korunur: Bearer token doğrulanır,
çağıranın `admins/{uid}` kaydı yoksa `403` döner.

---

## Endpoint'ler

### POST /createStaffUser
**Gövde (JSON):** `email`, `password`, `name`, `role` (hepsi zorunlu)

**İşleyiş:**
1. Firebase Auth'ta hesap açılır (`displayName = name`).
2. `staff/{uid}` dokümanına `{name, role, uid}` yazılır.
3. `{"success": true, "message": "User <name> created."}` döner.

**Hatalar:** `400` eksik alan, `409` e-posta kayıtlı, `500` diğer.

---

### POST /removeStaffMember
**Gövde (JSON):** `uidToRemove`

**İşleyiş:**
1. Kendini silme engellenir (`400`).
2. Firebase Auth hesabı silinir (yoksa `404`).
3. `staff/{uid}` dokümanı silinir.
4. `admins/{uid}` kaydı varsa o da silinir.

---

Tüm hatalar `{"error": "<mesaj>"}` gövdesiyle döner.
"""
import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ValidationError

from nightlife.app.config import Settings, get_document_store, get_identity_provider, get_settings
from nightlife.app.core.auth import require_admin
from nightlife.app.core.errors import InvalidArgument, handler_boundary
from nightlife.app.schemas.staff import (
    AdminCaller,
    ErrorResponse,
    StaffActionResponse,
    StaffCreateRequest,
    StaffRemoveRequest,
)
from nightlife.app.services import staff_accounts as svc

router = APIRouter(tags=["Staff"])

_ERRORS = {code: {"model": ErrorResponse} for code in (400, 401, 403, 405, 500)}


def json_payload(model: type[BaseModel], missing_message: str):
    """
    Gövdeyi auth kontrolünden SONRA okuyan bağımlılık üretir.
    Bozuk JSON, obje olmayan gövde veya eksik/boş alan -> 400.
    """
    async def _dependency(request: Request) -> BaseModel:
        raw = await request.body()
        try:
            data: Dict[str, Any] = json.loads(raw) if raw else {}
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidArgument(missing_message)
        if not isinstance(data, dict):
            raise InvalidArgument(missing_message)
        try:
            return model.model_validate(data)
        except ValidationError:
            raise InvalidArgument(missing_message)

    return _dependency


@router.post(
    "/createStaffUser",
    response_model=StaffActionResponse,
    summary="Yeni personel hesabı + staff profili oluştur",
    responses={**_ERRORS, 409: {"model": ErrorResponse}},
)
def create_staff_user(
    caller: AdminCaller = Depends(require_admin),
    payload: StaffCreateRequest = Depends(json_payload(StaffCreateRequest, "Missing required fields.")),
    identity=Depends(get_identity_provider),
    store=Depends(get_document_store),
    settings: Settings = Depends(get_settings),
):
    with handler_boundary("createStaffUser"):
        profile = svc.create_staff(
            identity,
            store,
            payload,
            staff_collection=settings.staff_collection,
            rollback_on_failure=settings.rollback_failed_create,
        )
    return StaffActionResponse(message=f"User {profile.name} created.")


@router.post(
    "/removeStaffMember",
    response_model=StaffActionResponse,
    summary="Personeli Auth ve Firestore'dan sil",
    responses={**_ERRORS, 404: {"model": ErrorResponse}},
)
def remove_staff_member(
    caller: AdminCaller = Depends(require_admin),
    payload: StaffRemoveRequest = Depends(json_payload(StaffRemoveRequest, "Missing uidToRemove field.")),
    identity=Depends(get_identity_provider),
    store=Depends(get_document_store),
    settings: Settings = Depends(get_settings),
):
    with handler_boundary("removeStaffMember"):
        svc.remove_staff(
            identity,
            store,
            caller.uid,
            payload.uidToRemove,
            staff_collection=settings.staff_collection,
            admins_collection=settings.admins_collection,
        )
    return StaffActionResponse(message=f"User {payload.uidToRemove} has been removed.")
