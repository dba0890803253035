# nightlife/app/core/identity.py
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth as firebase_auth


class IdentityProviderError(Exception):
    """Base class for identity-store outcomes the handlers care about."""


class InvalidCredential(IdentityProviderError):
    """Token is malformed, expired, revoked or belongs to a disabled account."""


class EmailAlreadyExists(IdentityProviderError):
    pass


class AccountNotFound(IdentityProviderError):
    pass


class FirebaseIdentityProvider:
    """
    Firebase Authentication üzerinden hesap doğrulama / oluşturma / silme.
    Firebase Admin hatalarını kendi küçük hata kümemize çevirir; geri kalan
    her şey (ağ, sertifika, kota) olduğu gibi yukarı fırlatılır.
    """

    def __init__(self, app: Optional[firebase_admin.App] = None, check_revoked: bool = True):
        self._app = app
        self._check_revoked = check_revoked

    def verify_token(self, id_token: str) -> Dict[str, Any]:
        if not isinstance(id_token, str) or not id_token:
            raise InvalidCredential("ID token must be a non-empty string")
        try:
            # check_revoked=True -> logout sonrası token'lar reddedilir
            return firebase_auth.verify_id_token(
                id_token, app=self._app, check_revoked=self._check_revoked
            )
        except (firebase_auth.InvalidIdTokenError, firebase_auth.UserDisabledError) as exc:
            raise InvalidCredential(str(exc)) from exc
        # ValueError (ör. project ID yok) yapılandırma hatasıdır, yukarı gider

    def create_account(self, email: str, password: str, display_name: str) -> str:
        try:
            user = firebase_auth.create_user(
                email=email, password=password, display_name=display_name, app=self._app
            )
        except firebase_auth.EmailAlreadyExistsError as exc:
            raise EmailAlreadyExists(email) from exc
        return user.uid

    def delete_account(self, uid: str) -> None:
        try:
            firebase_auth.delete_user(uid, app=self._app)
        except firebase_auth.UserNotFoundError as exc:
            raise AccountNotFound(uid) from exc

    def get_account_by_email(self, email: str) -> str:
        try:
            return firebase_auth.get_user_by_email(email, app=self._app).uid
        except firebase_auth.UserNotFoundError as exc:
            raise AccountNotFound(email) from exc
