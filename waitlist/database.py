# Configuración de base de datos usando SQLAlchemy.
#
# - DESARROLLO LOCAL: SQLite local (waitlist.db) si DATABASE_URL no está configurada
# - PRODUCCIÓN: PostgreSQL gestionado, vía DATABASE_URL

import logging
from pathlib import Path
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import get_settings

logger = logging.getLogger(__name__)

# Cargar variables de entorno desde .env (solo en desarrollo local)
backend_dir = Path(__file__).parent.parent
load_dotenv(dotenv_path=backend_dir / ".env")

DATABASE_URL = get_settings().database_url

if DATABASE_URL.startswith("sqlite"):
    logger.info("Usando SQLite local para desarrollo")
else:
    logger.info("Usando base de datos externa (DATABASE_URL configurada)")

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
  """
  Dependencia para inyectar la sesión de DB en los endpoints de FastAPI.
  """
  db = SessionLocal()
  try:
      yield db
  finally:
      db.close()
