# Importar todos los modelos para que create_all() los registre
from .email_subscriber import EmailSubscriber
from .notification_sent import NotificationSent, NotificationType

__all__ = [
    "EmailSubscriber",
    "NotificationSent",
    "NotificationType",
]
