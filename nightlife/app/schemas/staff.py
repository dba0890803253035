"""
nightlife/app/schemas/staff.py
Personel oluşturma / silme istek ve cevap modelleri.
"""
from typing import Annotated

from pydantic import BaseModel, Field

RequiredStr = Annotated[str, Field(min_length=1)]


class StaffCreateRequest(BaseModel):
    """POST /createStaffUser gövdesi. Dört alan da zorunlu ve boş olamaz."""
    email: RequiredStr = Field(..., description="E-posta")
    password: RequiredStr = Field(..., description="Şifre (kontrolü Firebase yapar)")
    name: RequiredStr = Field(..., description="Görünen ad")
    role: RequiredStr = Field(..., description="Personel rolü (bartender, door, manager ...)")


class StaffRemoveRequest(BaseModel):
    uidToRemove: RequiredStr = Field(..., description="Silinecek personelin Firebase UID'i")


class StaffProfile(BaseModel):
    """`staff/{uid}` dokümanı."""
    uid: str = Field(..., description="Firebase UID")
    name: str
    role: str


class AdminCaller(BaseModel):
    uid: str = Field(..., description="Doğrulanmış çağıranın Firebase UID'i")
    claims: dict = Field(default_factory=dict)


class StaffActionResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    error: str
