# filma/models/base.py
from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base
from filma.core.config import NAMING_CONVENTION

Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))
