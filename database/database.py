from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from core.config_loader import load_config

config = load_config()

engine = create_engine(config.database.url, echo=config.database.echo, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
