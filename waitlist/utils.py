from typing import Optional

from email_validator import EmailNotValidError, validate_email as _check_email_syntax


def normalize_email(email: Optional[str]) -> str:
    """
    Quita espacios al inicio/final. No cambia mayúsculas: el email se guarda tal cual.
    """
    return (email or "").strip()


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Valida el formato del email.

    Retorna None si es válido, o el mensaje de error para el usuario.

    Ejemplos:
    - "ann@campus.edu" -> None
    - "not-an-email" -> "Invalid email format"
    - "ann@localhost" -> "Invalid email format"
    - "a@b..c" -> "Invalid email format"
    """
    value = normalize_email(email)
    if not value:
        return "Email is required"
    try:
        # Solo sintaxis: sin consultas DNS. El email se guarda tal como lo escribió el usuario
        _check_email_syntax(value, check_deliverability=False)
    except EmailNotValidError:
        return "Invalid email format"
    return None


def validate_first_name(first_name: Optional[str]) -> Optional[str]:
    """
    Valida el nombre: no vacío y solo letras (incluye tildes) y espacios.

    Ejemplos:
    - "José María" -> None
    - "John123" -> "First name can only contain letters and spaces"
    """
    value = (first_name or "").strip()
    if not value:
        return "First name is required"
    if not all(char.isalpha() or char.isspace() for char in value):
        return "First name can only contain letters and spaces"
    return None
