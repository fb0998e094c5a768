from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.utils.ids import id_factory

class Cosmos(Base):
    __tablename__ = "cosmos"
    id = Column(String, primary_key=True, default=id_factory("cos"))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)  # dueño
    name = Column(String, nullable=False)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="cosmos", foreign_keys=[user_id])
    members = relationship("CosmosMember", back_populates="cosmos", cascade="all, delete-orphan")
    drives = relationship("StellarDrive", back_populates="cosmos", cascade="all, delete-orphan")
    constellations = relationship("Constellation", back_populates="cosmos", cascade="all, delete-orphan")
    auras = relationship("Aura", back_populates="cosmos", cascade="all, delete-orphan")


class CosmosMember(Base):
    __tablename__ = "cosmos_members"
    __table_args__ = (UniqueConstraint("cosmos_id", "user_id", name="uq_cosmos_member"),)
    id = Column(String, primary_key=True, default=id_factory("mem"))
    cosmos_id = Column(String, ForeignKey("cosmos.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    cosmos = relationship("Cosmos", back_populates="members")
    user = relationship("User")
