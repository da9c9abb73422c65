from typing import List, Optional

from pydantic import BaseModel


class BroadcastRequest(BaseModel):
    """Actualización personalizada enviada por el admin a una lista de emails."""
    title: str
    content: str
    recipients: List[str]


class BroadcastResponse(BaseModel):
    success: bool
    message: str
    count: Optional[int] = None
