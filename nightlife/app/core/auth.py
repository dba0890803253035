# nightlife/app/core/auth.py
import logging
from typing import Optional

from fastapi import Depends, Request

from nightlife.app.config import Settings, get_document_store, get_identity_provider, get_settings
from nightlife.app.core.errors import PermissionDenied, Unauthenticated, handler_boundary
from nightlife.app.core.identity import InvalidCredential
from nightlife.app.repositories import admins
from nightlife.app.schemas.staff import AdminCaller

logger = logging.getLogger("nightlife.auth")


def _extract_bearer_token(request: Request) -> Optional[str]:
    """
    Authorization: Bearer <id_token> başlığından token'ı alır.
    Yoksa None döner.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None
    parts = auth_header.split()
    if len(parts) == 2 and parts[0] == "Bearer":
        return parts[1]
    return None


def authorize_admin(request: Request, identity, store, admins_collection: str = admins.COL) -> AdminCaller:
    """
    Token'ı doğrular ve çağıranın `admins/{uid}` kaydı olup olmadığına bakar.
    Her istekte yeniden okunur; önbellek yok.
    """
    token = _extract_bearer_token(request)
    if not token:
        raise Unauthenticated()

    with handler_boundary("auth gate"):
        try:
            decoded = identity.verify_token(token)
        except InvalidCredential:
            raise Unauthenticated("Unauthorized: Invalid token.")

        uid = decoded.get("uid") or decoded.get("user_id")
        if not uid:
            raise Unauthenticated("Unauthorized: Token missing uid.")

        if not admins.is_admin(store, uid, admins_collection):
            logger.warning("Non-admin caller %s rejected on %s", uid, request.url.path)
            raise PermissionDenied()

    return AdminCaller(uid=uid, claims=decoded)


def require_admin(
    request: Request,
    identity=Depends(get_identity_provider),
    store=Depends(get_document_store),
    settings: Settings = Depends(get_settings),
) -> AdminCaller:
    """
    Sadece admin kayıtlı kullanıcıları kabul eder.
    Her iki personel endpoint'i de bu bağımlılıkla korunur.
    """
    return authorize_admin(request, identity, store, settings.admins_collection)
