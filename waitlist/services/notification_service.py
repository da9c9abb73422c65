"""
Servicio de notificaciones de la lista de espera.

Orquesta suscripción, lanzamiento y actualizaciones: consulta/escribe en la base,
renderiza plantillas, envía por el transporte de email y registra cada intento.
Ninguna operación lanza excepciones: siempre devuelve un DispatchResult.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.notification_sent import NotificationType
from ..utils import normalize_email, validate_email, validate_first_name
from .email_service import ResendEmailSender
from .email_templates import (
    RenderedEmail,
    render_launch_email,
    render_update_email,
    render_welcome_email,
)
from .subscriber_store import DeliveryLog, DuplicateSubscriberError, StoreError, SubscriberStore

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Welcome to CampusConnect!"
LAUNCH_TITLE = "CampusConnect is LIVE!"
FALLBACK_FIRST_NAME = "User"
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."

# Valores de DispatchResult.error (los usa la capa HTTP para elegir el status code)
ERROR_VALIDATION = "validation"
ERROR_STORE = "store"
ERROR_TRANSPORT = "transport"
ERROR_NOT_FOUND = "not_found"


@dataclass
class DispatchResult:
    success: bool
    message: str
    email_sent: Optional[bool] = None
    count: Optional[int] = None
    error: Optional[str] = None


class NotificationDispatchService:
    def __init__(
        self,
        store: SubscriberStore,
        delivery_log: DeliveryLog,
        sender: ResendEmailSender,
        site_url: str = "#",
    ):
        self.store = store
        self.delivery_log = delivery_log
        self.sender = sender
        self.site_url = site_url

    async def _deliver(
        self,
        type: NotificationType,
        recipient: str,
        rendered: RenderedEmail,
        title: str,
        success_content: str,
    ) -> bool:
        """Un envío + exactamente un registro en notifications_sent."""
        result = await self.sender.send(recipient, rendered.subject, rendered.html, rendered.text)

        if result.success:
            logger.info(f"Email {type.value} enviado a {recipient}")
            content = success_content
        else:
            logger.error(f"Falló el email {type.value} para {recipient}: {result.message}")
            content = f"Email sending failed: {result.message}"

        try:
            self.delivery_log.append(
                type=type,
                title=title,
                content=content,
                recipient_email=recipient,
                success=result.success,
            )
        except StoreError as e:
            # El registro es observabilidad: no corta el envío a los demás
            logger.error(f"No se pudo registrar el envío a {recipient}: {e}")

        return result.success

    async def subscribe(self, email: str, first_name: str) -> DispatchResult:
        """
        Suscribe un email a la lista de espera y envía el email de bienvenida.

        El email de bienvenida se (re)envía también si el email ya estaba suscrito.
        Un fallo del transporte nunca bloquea el alta: se responde success=True
        con email_sent=False.
        """
        error = validate_email(email) or validate_first_name(first_name)
        if error:
            logger.info(f"Suscripción rechazada ({error}): {email!r}")
            return DispatchResult(success=False, message=error, email_sent=False, error=ERROR_VALIDATION)

        email = normalize_email(email)
        first_name = first_name.strip()

        try:
            existing = self.store.find_by_email(email)
        except StoreError as e:
            logger.error(f"Error al consultar suscriptor {email}: {e}", exc_info=True)
            return DispatchResult(success=False, message=GENERIC_ERROR_MESSAGE, email_sent=False, error=ERROR_STORE)

        welcome = render_welcome_email(first_name)
        email_sent = await self._deliver(
            NotificationType.WELCOME,
            email,
            welcome,
            title=WELCOME_TITLE,
            success_content=f"Welcome email sent to {first_name} at {email}",
        )

        already_subscribed = existing is not None
        if not already_subscribed:
            try:
                self.store.insert(email, first_name)
                logger.info(f"Nuevo suscriptor: {email}")
            except DuplicateSubscriberError:
                # Otra request suscribió el mismo email entre la búsqueda y el insert
                logger.info(f"Suscripción concurrente detectada para {email}")
                already_subscribed = True
            except StoreError as e:
                logger.error(f"Error al guardar suscriptor {email}: {e}", exc_info=True)
                return DispatchResult(
                    success=False, message=GENERIC_ERROR_MESSAGE, email_sent=email_sent, error=ERROR_STORE
                )

        if already_subscribed:
            if email_sent:
                message = f"{first_name}, you're already on our list! We've sent your welcome email again."
            else:
                message = f"{first_name}, you're already on our list! We'll notify you when CampusConnect launches."
        elif email_sent:
            message = f"Thanks {first_name}! Check your inbox at {email} for a welcome email."
        else:
            message = (
                f"Thanks {first_name}! You're on the list, but we couldn't send your welcome email right now. "
                "We'll still notify you when CampusConnect launches."
            )

        return DispatchResult(success=True, message=message, email_sent=email_sent)

    async def broadcast_launch(self) -> DispatchResult:
        """
        Envía el email de lanzamiento a todos los suscriptores activos, uno por uno.

        count es la cantidad de intentos, no de entregas exitosas.
        """
        if not self.sender.is_configured():
            return DispatchResult(success=False, message="Email service not configured", error=ERROR_TRANSPORT)

        try:
            subscribers = self.store.list_active()
        except StoreError as e:
            logger.error(f"Error al obtener suscriptores: {e}", exc_info=True)
            return DispatchResult(success=False, message="Failed to fetch subscribers", error=ERROR_STORE)

        if not subscribers:
            logger.info("No active subscribers found")
            return DispatchResult(success=False, message="No active subscribers found", error=ERROR_NOT_FOUND)

        logger.info(f"Enviando notificación de lanzamiento a {len(subscribers)} suscriptores")

        delivered = 0
        for subscriber in subscribers:
            rendered = render_launch_email(subscriber.first_name, self.site_url)
            if await self._deliver(
                NotificationType.LAUNCH,
                subscriber.email,
                rendered,
                title=LAUNCH_TITLE,
                success_content="Launch notification sent",
            ):
                delivered += 1

        logger.info(f"Lanzamiento: {delivered}/{len(subscribers)} emails entregados")
        return DispatchResult(
            success=True,
            message=f"Launch notifications sent to {len(subscribers)} subscribers",
            count=len(subscribers),
        )

    def _first_name_for(self, email: str) -> str:
        try:
            subscriber = self.store.find_active_by_email(email)
        except StoreError as e:
            logger.warning(f"No se pudo obtener el nombre de {email}, se usa '{FALLBACK_FIRST_NAME}': {e}")
            return FALLBACK_FIRST_NAME
        if subscriber is None or not subscriber.first_name:
            return FALLBACK_FIRST_NAME
        return subscriber.first_name

    async def send_update(self, title: str, content: str, recipients: List[str]) -> DispatchResult:
        """
        Envía una actualización personalizada a los emails elegidos por el admin.

        No se verifica que los destinatarios sean suscriptores activos; si no lo son,
        el saludo usa un nombre genérico.
        """
        title = (title or "").strip()
        content = (content or "").strip()
        if not title or not content:
            return DispatchResult(
                success=False,
                message="Please fill in both title and content for the update.",
                error=ERROR_VALIDATION,
            )
        if not recipients:
            return DispatchResult(success=False, message="No recipients selected", error=ERROR_VALIDATION)

        if not self.sender.is_configured():
            return DispatchResult(success=False, message="Email service not configured", error=ERROR_TRANSPORT)

        logger.info(f"Enviando actualización '{title}' a {len(recipients)} destinatarios")

        for recipient in recipients:
            first_name = self._first_name_for(recipient)
            rendered = render_update_email(first_name, title, content)
            await self._deliver(
                NotificationType.UPDATE,
                recipient,
                rendered,
                title=title,
                success_content=content,
            )

        return DispatchResult(
            success=True,
            message=f"Update emails sent to {len(recipients)} recipients",
            count=len(recipients),
        )

    def get_subscribers(self) -> Optional[List[dict]]:
        """Suscriptores activos para el panel de admin, los más recientes primero. None si falla la base."""
        try:
            subscribers = self.store.list_recent()
        except StoreError as e:
            logger.error(f"Error al obtener suscriptores: {e}", exc_info=True)
            return None
        return [
            {
                "email": subscriber.email,
                "firstName": subscriber.first_name,
                "timestamp": subscriber.subscribed_at,
            }
            for subscriber in subscribers
        ]

    def get_stats(self) -> Optional[dict]:
        try:
            return {
                "totalSubscribers": self.store.count_active(),
                "totalNotifications": self.delivery_log.count(),
            }
        except StoreError as e:
            logger.error(f"Error al obtener estadísticas: {e}", exc_info=True)
            return None
