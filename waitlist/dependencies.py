"""
Dependencias de FastAPI compartidas por los routers.
El servicio de notificaciones se arma por request con sus colaboradores explícitos.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from .config import get_settings
from .database import get_db
from .services.email_service import ResendEmailSender, get_email_sender
from .services.notification_service import (
    ERROR_NOT_FOUND,
    ERROR_VALIDATION,
    DispatchResult,
    NotificationDispatchService,
)
from .services.subscriber_store import DeliveryLog, SubscriberStore


def get_notification_service(
    db: Session = Depends(get_db),
    sender: ResendEmailSender = Depends(get_email_sender),
) -> NotificationDispatchService:
    return NotificationDispatchService(
        store=SubscriberStore(db),
        delivery_log=DeliveryLog(db),
        sender=sender,
        site_url=get_settings().site_url,
    )


def status_code_for(result: DispatchResult) -> int:
    """Traduce el resultado del servicio a un status HTTP."""
    if result.success:
        return 200
    if result.error == ERROR_VALIDATION:
        return 400
    if result.error == ERROR_NOT_FOUND:
        return 404
    return 500
