"""
Role ORM Model
Maps to the roles table and the user_roles association table
"""
from sqlalchemy import Column, ForeignKey, Integer, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shared.infrastructure.database.base_model import Base


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class RoleModel(Base):
    """
    SQLAlchemy model for the roles table.
    
    Reference data with well-known integer ids, seeded at bootstrap.
    """
    
    __tablename__ = "roles"
    
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    
    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
