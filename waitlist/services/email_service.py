"""
Servicio de Email usando Resend
Documentación: https://resend.com/docs

Un envío = una llamada a la API. Cualquier error (HTTP no-2xx, red, credenciales)
se convierte en un EmailResult con success=False y el texto crudo del error.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import resend
from resend.exceptions import ResendError
from fastapi.concurrency import run_in_threadpool

from ..config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class EmailResult:
    success: bool
    message: str
    message_id: Optional[str] = None


class ResendEmailSender:
    """Transporte de emails sobre la API de Resend."""

    def __init__(self, api_key: Optional[str], from_email: str, reply_to: Optional[str] = None):
        self.api_key = api_key
        self.from_email = from_email
        self.reply_to = reply_to

    def is_configured(self) -> bool:
        """Verifica si el servicio de email está configurado correctamente"""
        if not self.api_key:
            logger.warning("RESEND_API_KEY no configurada en variables de entorno")
            return False
        return True

    def get_config_info(self) -> dict:
        """Información de configuración para el panel de admin (nunca expone la API key)"""
        return {
            "api_key_configured": bool(self.api_key),
            "from_email": self.from_email,
            "reply_to": self.reply_to or None,
            "configured": bool(self.api_key),
        }

    async def send(self, to: str, subject: str, html: str, text: Optional[str] = None) -> EmailResult:
        """
        Envía un email a un único destinatario.

        Args:
            to: Email del destinatario
            subject: Asunto
            html: Cuerpo HTML ya renderizado
            text: Versión plain text (opcional, mejora deliverability)

        Returns:
            EmailResult: success y mensaje legible (el error crudo en caso de fallo)
        """
        if not self.is_configured():
            return EmailResult(success=False, message="Email service not configured")

        params = {
            "from": self.from_email,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        if text:
            params["text"] = text
        if self.reply_to:
            params["reply_to"] = [self.reply_to]

        try:
            resend.api_key = self.api_key
            # El SDK es síncrono: se ejecuta en el threadpool para no bloquear el event loop
            response = await run_in_threadpool(resend.Emails.send, params)
        except ResendError as e:
            logger.error(f"Resend rechazó el email para {to}: {e}")
            return EmailResult(success=False, message=str(e))
        except Exception as e:
            logger.error(f"Error al enviar email a {to}: {str(e)}", exc_info=True)
            return EmailResult(success=False, message=str(e))

        message_id = response.get("id") if isinstance(response, dict) else getattr(response, "id", None)
        logger.info(f"Email enviado exitosamente a {to}. ID: {message_id or 'N/A'}")
        return EmailResult(success=True, message="Email sent", message_id=message_id)


def get_email_sender() -> ResendEmailSender:
    """Dependencia de FastAPI: construye el transporte a partir de la configuración actual."""
    settings = get_settings()
    return ResendEmailSender(
        api_key=settings.resend_api_key,
        from_email=settings.resend_from_email,
        reply_to=settings.resend_reply_to,
    )
