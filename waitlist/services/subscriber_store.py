"""
Acceso a datos de suscriptores y al registro de envíos.
Wrappers finos sobre la sesión de SQLAlchemy: sin reglas de negocio.
"""
import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.email_subscriber import EmailSubscriber
from ..models.notification_sent import NotificationSent, NotificationType

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """La base de datos no respondió o rechazó la operación."""


class DuplicateSubscriberError(StoreError):
    """Ya existe un suscriptor con ese email (violación de unique)."""


class SubscriberStore:
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[EmailSubscriber]:
        try:
            return self.db.query(EmailSubscriber).filter(
                EmailSubscriber.email == email
            ).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Error al buscar suscriptor {email}: {e}") from e

    def find_active_by_email(self, email: str) -> Optional[EmailSubscriber]:
        try:
            return self.db.query(EmailSubscriber).filter(
                EmailSubscriber.email == email,
                EmailSubscriber.is_active == True,  # noqa: E712
            ).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Error al buscar suscriptor activo {email}: {e}") from e

    def insert(self, email: str, first_name: str) -> EmailSubscriber:
        subscriber = EmailSubscriber(email=email, first_name=first_name, is_active=True)
        try:
            self.db.add(subscriber)
            self.db.commit()
            self.db.refresh(subscriber)
            return subscriber
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateSubscriberError(email) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Error al guardar suscriptor {email}: {e}") from e

    def list_active(self) -> List[EmailSubscriber]:
        """Suscriptores activos en orden de inserción."""
        try:
            return self.db.query(EmailSubscriber).filter(
                EmailSubscriber.is_active == True  # noqa: E712
            ).order_by(EmailSubscriber.id).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Error al listar suscriptores: {e}") from e

    def list_recent(self) -> List[EmailSubscriber]:
        """Suscriptores activos, los más recientes primero (para el panel de admin)."""
        try:
            return self.db.query(EmailSubscriber).filter(
                EmailSubscriber.is_active == True  # noqa: E712
            ).order_by(
                desc(EmailSubscriber.subscribed_at),
                desc(EmailSubscriber.id),
            ).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Error al listar suscriptores: {e}") from e

    def count_active(self) -> int:
        try:
            return self.db.query(EmailSubscriber).filter(
                EmailSubscriber.is_active == True  # noqa: E712
            ).count()
        except SQLAlchemyError as e:
            raise StoreError(f"Error al contar suscriptores: {e}") from e


class DeliveryLog:
    """Tabla notifications_sent: solo se agregan filas, nunca se modifican."""

    def __init__(self, db: Session):
        self.db = db

    def append(
        self,
        type: NotificationType,
        title: str,
        content: str,
        recipient_email: str,
        success: bool,
    ) -> NotificationSent:
        record = NotificationSent(
            type=NotificationType(type).value,
            title=title,
            content=content,
            recipient_email=recipient_email,
            success=success,
        )
        try:
            self.db.add(record)
            self.db.commit()
            return record
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Error al registrar envío a {recipient_email}: {e}") from e

    def count(self) -> int:
        try:
            return self.db.query(NotificationSent).count()
        except SQLAlchemyError as e:
            raise StoreError(f"Error al contar envíos: {e}") from e
