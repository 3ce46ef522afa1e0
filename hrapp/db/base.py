from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Every table and stored function lives in this schema.
HR_SCHEMA = "hr"


class Base(DeclarativeBase):
    metadata = MetaData(schema=HR_SCHEMA)

# Import models so Alembic can discover them
from hrapp.models import *  # noqa
