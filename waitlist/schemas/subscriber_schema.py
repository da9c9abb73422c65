from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SubscribeRequest(BaseModel):
    # Sin EmailStr: la validación la hace el servicio para responder {success, message}
    email: str
    firstName: str


class SubscribeResponse(BaseModel):
    success: bool
    message: str
    emailSent: bool = False


class SubscriberOut(BaseModel):
    email: str
    firstName: str
    timestamp: datetime


class StatsOut(BaseModel):
    totalSubscribers: int
    totalNotifications: int


class EmailConfigOut(BaseModel):
    api_key_configured: bool
    from_email: str
    reply_to: Optional[str] = None
    configured: bool
