"""ORM model for application users (auth and role gating)."""

from sqlalchemy import Column, Integer, String

from stockroom.models.base import Base


class User(Base):
    """
    User account for console and API login.

    role: 'admin' or 'staff'. password holds plaintext or a bcrypt hash depending on PASSWORD_HASHING.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False, default="staff")
