import os

class Settings:
    """Configuración de la aplicación que lee variables de entorno dinámicamente."""

    @property
    def app_name(self) -> str:
        return "CampusConnect Waitlist"

    @property
    def environment(self) -> str:
        env = os.getenv("ENV", "").lower()
        # Si hay PORT asignado por la plataforma o ENV=production, es producción
        if env == "production" or os.getenv("PORT"):
            return "production"
        return "development"

    @property
    def cors_origin(self) -> str:
        # Orígenes extra separados por coma; vacío = solo los de desarrollo
        return os.getenv("CORS_ORIGIN", "")

    @property
    def database_url(self) -> str:
        return os.getenv("DATABASE_URL", "").strip() or "sqlite:///./waitlist.db"

    @property
    def resend_api_key(self) -> str:
        return os.getenv("RESEND_API_KEY", "")

    @property
    def resend_from_email(self) -> str:
        return os.getenv("RESEND_FROM_EMAIL", "CampusConnect Team <noreply@campusconnect.app>")

    @property
    def resend_reply_to(self) -> str:
        return os.getenv("RESEND_REPLY_TO", "")

    @property
    def admin_api_token(self) -> str:
        return os.getenv("ADMIN_API_TOKEN", "")

    @property
    def site_url(self) -> str:
        return os.getenv("SITE_URL", "http://localhost:5173")

# Instancia singleton de Settings (sin cache, lee valores dinámicamente)
_settings_instance = None

def get_settings() -> Settings:
    """Retorna la instancia de Settings. Lee variables de entorno dinámicamente."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

def clear_settings_cache():
    """Limpia la instancia de settings (aunque no es necesario con propiedades dinámicas)."""
    global _settings_instance
    _settings_instance = None
