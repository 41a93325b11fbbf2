from sqlalchemy import BigInteger, Column, String
from tasktracker.database import Base

class User(Base):
    __tablename__ = "users"

    # the caller identity doubles as primary key
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        return f"<User {self.id}>"
