"""
Registro append-only de cada intento de envío de email (welcome, launch, update).
Se guarda tanto el éxito como el fallo.
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text
from datetime import datetime

from ..database import Base


class NotificationType(str, enum.Enum):
    WELCOME = "welcome"
    LAUNCH = "launch"
    UPDATE = "update"


class NotificationSent(Base):
    __tablename__ = "notifications_sent"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(20), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    recipient_email = Column(String(255), nullable=False, index=True)  # Sin FK: puede no ser suscriptor
    success = Column(Boolean, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
