#!/usr/bin/env python3
"""
Firebase Auth'taki bir kullanıcıyı e-posta ile bulur ve `admins/{uid}` kaydını yazar.
Personel endpoint'leri bu kayda bakarak admin yetkisi verir.
"""
import sys
from typing import Optional, Sequence

from nightlife.app.config import get_document_store, get_identity_provider, get_settings
from nightlife.app.core.identity import AccountNotFound
from nightlife.app.repositories import admins


def grant_admin(identity, store, user_email: str, collection: str = admins.COL) -> str:
    """Kullanıcıya admin kaydı ekler ve UID'ini döner."""
    uid = identity.get_account_by_email(user_email)
    admins.grant(store, uid, collection)
    return uid


def main(argv: Optional[Sequence[str]] = None, identity=None, store=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if len(argv) != 1:
        print("Usage: nightlife-grant-admin <user_email>")
        print("Example: nightlife-grant-admin manager@example.com")
        return 1

    user_email = argv[0]
    print(f"Granting admin access to: {user_email}")

    settings = get_settings()
    if identity is None:
        identity = get_identity_provider(settings)
    if store is None:
        store = get_document_store(settings)

    try:
        uid = grant_admin(identity, store, user_email, settings.admins_collection)
    except AccountNotFound:
        print(f"❌ User not found: {user_email}")
        return 1

    print(f"✅ Admin record written for {uid}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
