"""ORM model for inventory products."""

from sqlalchemy import Column, Integer, Numeric, String

from stockroom.models.base import Base


class Product(Base):
    """
    Inventory item. Categories are free text; the set in use is derived from this table.

    price is NUMERIC(10, 2) so values round-trip as Decimal.
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
