# taskflow/models/user.py

import uuid
from sqlalchemy import Column, String
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Registered account.
    Email is stored trimmed and lower-cased; only the bcrypt hash of the
    password is kept.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    def summary(self) -> dict:
        return {"id": self.id, "email": self.email, "username": self.username}
