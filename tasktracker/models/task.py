from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, String, Text
from tasktracker.database import Base

class Task(Base):
    __tablename__ = "tasks"

    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    is_completed = Column(Boolean, nullable=False, default=False)
    # set once at creation, never reassigned
    owner = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        return f"<Task {self.id} owner={self.owner}>"
