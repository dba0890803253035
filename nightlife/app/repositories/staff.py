from nightlife.app.schemas.staff import StaffProfile

COL = "staff"


def save_profile(store, profile: StaffProfile, collection: str = COL) -> None:
    store.set(collection, profile.uid, {
        "name": profile.name,
        "role": profile.role,
        "uid": profile.uid,
    })


def delete_profile(store, uid: str, collection: str = COL) -> None:
    store.delete(collection, uid)
