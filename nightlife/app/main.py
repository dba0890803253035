"""
# `nightlife/app/main.py` - Ana Uygulama Dokümantasyonu

## Genel Bilgi
Bu dosya, FastAPI uygulamasının başlangıç noktasıdır.
CORS ayarları yapılır, hata handler'ları kaydedilir ve personel router'ı bağlanır.

---

## Uygulama Başlatma
- `create_app()` bir `FastAPI` örneği döndürür (`title`, `description`, `version`).
- CORS ayarları `settings.allowed_origins` üzerinden yapılır (liste veya `*`).
- Log seviyesi `settings.log_level` ile belirlenir.
- Firebase, ilk istek geldiğinde `create_app`e verilen ayarlarla bir kez başlatılır (`config.get_firebase_app`).

---

## Router'lar
- `POST /createStaffUser`
- `POST /removeStaffMember`

Her ikisi de `require_admin` ile korunur.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nightlife.app.config import Settings, get_settings
from nightlife.app.core.errors import register_exception_handlers
from nightlife.app.routers import staff


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Nightlife Staff Admin API",
        description="Admin-only endpoints for provisioning and removing staff accounts.",
        version="1.0.0",
        redirect_slashes=False,
    )

    # Configure CORS (allow front-end domain or all origins as specified)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(staff.router)
    app.dependency_overrides[get_settings] = lambda: settings
    return app


app = create_app()

# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("nightlife.app.main:app", host="0.0.0.0", port=8000, reload=True)
