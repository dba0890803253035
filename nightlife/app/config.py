"""
nightlife/app/config.py - Application configuration and Firebase initialization.

This module defines a Pydantic BaseSettings class to load configuration from environment,
and lazily initializes the Firebase Admin SDK (Auth + Firestore) using the provided credentials.
Route handlers receive the identity provider and document store through the
`get_identity_provider` / `get_document_store` dependencies instead of module globals.
"""
from functools import lru_cache
from typing import Optional

import firebase_admin
from fastapi import Depends
from firebase_admin import credentials, firestore
from pydantic_settings import BaseSettings, SettingsConfigDict

from nightlife.app.core.documents import FirestoreDocumentStore
from nightlife.app.core.identity import FirebaseIdentityProvider


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    firebase_cred_file: Optional[str] = None
    firebase_project_id: Optional[str] = None

    # Firebase credentials from environment variables (managed hosting)
    firebase_private_key_id: Optional[str] = None
    firebase_private_key: Optional[str] = None
    firebase_client_email: Optional[str] = None
    firebase_client_id: Optional[str] = None
    firebase_auth_uri: Optional[str] = None
    firebase_token_uri: Optional[str] = None
    firebase_auth_provider_x509_cert_url: Optional[str] = None
    firebase_client_x509_cert_url: Optional[str] = None

    allowed_origins: str = "*"  # Comma-separated list or '*' for all
    admins_collection: str = "admins"
    staff_collection: str = "staff"
    check_revoked_tokens: bool = True
    rollback_failed_create: bool = False
    log_level: str = "INFO"

    @property
    def cors_origins(self) -> list[str]:
        if not self.allowed_origins or self.allowed_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    def has_inline_credentials(self) -> bool:
        return all([
            self.firebase_private_key_id,
            self.firebase_private_key,
            self.firebase_client_email,
            self.firebase_client_id,
            self.firebase_auth_uri,
            self.firebase_token_uri,
            self.firebase_auth_provider_x509_cert_url,
            self.firebase_client_x509_cert_url,
        ])


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_credential(settings: Settings) -> credentials.Base:
    """Pick the service-account credential: env fields, then key file, then ADC."""
    if settings.has_inline_credentials():
        cred_dict = {
            "type": "service_account",
            "project_id": settings.firebase_project_id,
            "private_key_id": settings.firebase_private_key_id,
            # Keys pasted into env vars usually carry literal "\n"
            "private_key": settings.firebase_private_key.replace("\\n", "\n"),
            "client_email": settings.firebase_client_email,
            "client_id": settings.firebase_client_id,
            "auth_uri": settings.firebase_auth_uri,
            "token_uri": settings.firebase_token_uri,
            "auth_provider_x509_cert_url": settings.firebase_auth_provider_x509_cert_url,
            "client_x509_cert_url": settings.firebase_client_x509_cert_url,
        }
        return credentials.Certificate(cred_dict)
    if settings.firebase_cred_file:
        return credentials.Certificate(settings.firebase_cred_file)
    return credentials.ApplicationDefault()


def init_firebase(settings: Settings) -> firebase_admin.App:
    """Initialize the default Firebase app once per process."""
    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    try:
        return firebase_admin.initialize_app(build_credential(settings), options)
    except ValueError as e:
        if "already exists" in str(e):
            # Firebase app already initialized, get the default app
            return firebase_admin.get_app()
        raise


def get_firebase_app(settings: Settings) -> firebase_admin.App:
    """Return the default Firebase app, initializing it from `settings` on first use."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        return init_firebase(settings)


def get_identity_provider(settings: Settings = Depends(get_settings)) -> FirebaseIdentityProvider:
    return FirebaseIdentityProvider(get_firebase_app(settings), check_revoked=settings.check_revoked_tokens)


def get_document_store(settings: Settings = Depends(get_settings)) -> FirestoreDocumentStore:
    # firestore.client() caches one client per Firebase app
    return FirestoreDocumentStore(firestore.client(get_firebase_app(settings)))
