from sqlalchemy import Column, String, BigInteger, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class URLMapping(Base):
    __tablename__ = "url_mappings"

    # Hash-derived identifier, up to 2**31 so it needs a 64-bit column
    identifier = Column(BigInteger, primary_key=True, autoincrement=False)
    original_url = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
