import logging
from pathlib import Path
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import inspect

from .routers import waitlist, admin
from .config import get_settings, clear_settings_cache
from .database import Base, engine

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Cargar variables de entorno desde .env (solo en desarrollo local)
backend_dir = Path(__file__).parent.parent
env_path = backend_dir / ".env"
loaded = load_dotenv(dotenv_path=env_path)
if loaded:
    logger.info(f"Variables de entorno cargadas desde: {env_path}")
else:
    logger.warning(f"No se pudo cargar archivo .env desde: {env_path}")

# Limpiar cache de settings para asegurar que se recarguen las variables
clear_settings_cache()

# Importar todos los modelos para que SQLAlchemy los registre antes de create_all()
from .models import EmailSubscriber, NotificationSent  # noqa: F401,E402

app_settings = get_settings()

app = FastAPI(title=app_settings.app_name, version="0.1.0", redirect_slashes=False)

# Construir lista de orígenes permitidos dinámicamente
allowed_origins = [
    "http://localhost:5173",
    "http://localhost:8080",
]

cors_origin_env = app_settings.cors_origin
if cors_origin_env:
    # Permitir múltiples orígenes separados por coma
    for origin in (o.strip() for o in cors_origin_env.split(",")):
        if origin and origin not in allowed_origins:
            allowed_origins.append(origin)
elif app_settings.environment == "production":
    logger.warning("⚠️ CORS_ORIGIN no configurado en producción, permitiendo todos los orígenes")
    allowed_origins = ["*"]

logger.info(f"🌐 Orígenes CORS permitidos: {allowed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials="*" not in allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def create_tables():
    """Crea las tablas en la base de datos si no existen."""
    try:
        logger.info("Creando tablas en la base de datos...")
        expected_tables = list(Base.metadata.tables.keys())

        Base.metadata.create_all(bind=engine)

        existing_tables = inspect(engine).get_table_names()
        missing_tables = [t for t in expected_tables if t not in existing_tables]
        if missing_tables:
            logger.warning(f"⚠️  Tablas faltantes: {', '.join(missing_tables)}")
        else:
            logger.info("✅ Todas las tablas fueron creadas/verificadas exitosamente")
    except Exception as e:
        logger.error(f"❌ ERROR al crear tablas: {str(e)}", exc_info=True)
        raise


# Crear tablas al iniciar (no bloquear el inicio si falla)
try:
    create_tables()
except Exception:
    logger.warning("⚠️ El servidor continuará iniciando, pero algunas funcionalidades pueden no estar disponibles")

app.include_router(waitlist.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


@app.get("/", tags=["root"])
async def root():
    return {"message": f"Bienvenido al backend de {app_settings.app_name}"}


@app.get("/api/health", tags=["health"])
async def health():
    logger.info("💓 Health check recibido")
    return {"status": "ok", "server": "alive"}


@app.get("/api/ping", tags=["health"])
async def ping():
    import time
    return {"pong": True, "time": time.time()}

