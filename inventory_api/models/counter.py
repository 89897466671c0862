"""
Counter model - one row per named sequence
"""
from sqlalchemy import Column, Integer, String
from inventory_api.database import Base


class Counter(Base):
    __tablename__ = "counters"

    name = Column(String, primary_key=True)  # sequence name, e.g. "supplierId"
    seq = Column(Integer, nullable=False, default=0)
