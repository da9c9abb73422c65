"""
Modelo para suscriptores de la lista de espera.
Un registro por email; se crea en la primera suscripción exitosa.
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from datetime import datetime

from ..database import Base


class EmailSubscriber(Base):
    __tablename__ = "email_subscribers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(120), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    subscribed_at = Column(DateTime, default=datetime.utcnow, nullable=False)
