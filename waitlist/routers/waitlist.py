"""
API Router para la lista de espera (formulario público de la landing).
"""
from fastapi import APIRouter, Depends, Response

from ..dependencies import get_notification_service, status_code_for
from ..schemas.subscriber_schema import SubscribeRequest, SubscribeResponse
from ..services.notification_service import NotificationDispatchService

router = APIRouter(prefix="/waitlist", tags=["waitlist"])


@router.post("/subscribe", response_model=SubscribeResponse)
async def subscribe_to_waitlist(
    request: SubscribeRequest,
    response: Response,
    service: NotificationDispatchService = Depends(get_notification_service),
):
    """
    Suscribir un email a la lista de espera y enviar el email de bienvenida.
    Si el email ya existe, devuelve success=True con mensaje de "ya suscrito".
    """
    result = await service.subscribe(request.email, request.firstName)
    response.status_code = status_code_for(result)
    return SubscribeResponse(
        success=result.success,
        message=result.message,
        emailSent=bool(result.email_sent),
    )
