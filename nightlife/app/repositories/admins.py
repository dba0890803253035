from typing import Optional, Dict, Any

COL = "admins"


def get(store, uid: str, collection: str = COL) -> Optional[Dict[str, Any]]:
    return store.get(collection, uid)


def is_admin(store, uid: str, collection: str = COL) -> bool:
    return get(store, uid, collection) is not None


def grant(store, uid: str, collection: str = COL) -> None:
    store.set(collection, uid, {"adminId": uid})


def revoke_if_present(store, uid: str, collection: str = COL) -> bool:
    """Admin kaydı varsa siler; silindiyse True döner."""
    if get(store, uid, collection) is None:
        return False
    store.delete(collection, uid)
    return True
