"""
API Router del panel de administración: lanzamiento, actualizaciones y métricas.
Todos los endpoints exigen el header X-Admin-Token.
"""
import logging
import secrets
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..dependencies import get_notification_service, status_code_for
from ..schemas.notification_schema import BroadcastRequest, BroadcastResponse
from ..schemas.subscriber_schema import EmailConfigOut, StatsOut, SubscriberOut
from ..services.email_service import ResendEmailSender, get_email_sender
from ..services.notification_service import NotificationDispatchService

logger = logging.getLogger(__name__)


def require_admin(x_admin_token: Optional[str] = Header(None)) -> None:
    """Valida el token de admin contra ADMIN_API_TOKEN (configurado solo en el servidor)."""
    expected = get_settings().admin_api_token
    if not expected:
        logger.warning("ADMIN_API_TOKEN no configurado, acceso de admin deshabilitado")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Admin access not configured")
    if not x_admin_token or not secrets.compare_digest(x_admin_token, expected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin token")


router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _store_failure(message: str) -> JSONResponse:
    """Mismo formato {success, message} que el resto de las respuestas de error."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": message},
    )


@router.post("/broadcast/launch", response_model=BroadcastResponse)
async def broadcast_launch(
    response: Response,
    service: NotificationDispatchService = Depends(get_notification_service),
):
    """Envía el email de lanzamiento a todos los suscriptores activos."""
    result = await service.broadcast_launch()
    response.status_code = status_code_for(result)
    return BroadcastResponse(success=result.success, message=result.message, count=result.count)


@router.post("/broadcast/update", response_model=BroadcastResponse)
async def broadcast_update(
    payload: BroadcastRequest,
    response: Response,
    service: NotificationDispatchService = Depends(get_notification_service),
):
    """Envía una actualización personalizada a los destinatarios elegidos."""
    result = await service.send_update(payload.title, payload.content, payload.recipients)
    response.status_code = status_code_for(result)
    return BroadcastResponse(success=result.success, message=result.message, count=result.count)


@router.get("/subscribers", response_model=List[SubscriberOut])
def list_subscribers(service: NotificationDispatchService = Depends(get_notification_service)):
    """Suscriptores activos, los más recientes primero."""
    subscribers = service.get_subscribers()
    if subscribers is None:
        return _store_failure("Failed to fetch subscribers")
    return subscribers


@router.get("/stats", response_model=StatsOut)
def get_stats(service: NotificationDispatchService = Depends(get_notification_service)):
    stats = service.get_stats()
    if stats is None:
        return _store_failure("Failed to fetch stats")
    return stats


@router.get("/email-config", response_model=EmailConfigOut)
def get_email_config(sender: ResendEmailSender = Depends(get_email_sender)):
    """Estado de la configuración de Resend (sin exponer la API key)."""
    return sender.get_config_info()
