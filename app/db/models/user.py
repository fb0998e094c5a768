from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.db.models.enums import Preset, Plan, WorkspaceType
from app.utils.ids import id_factory

class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=id_factory("usr"))
    external_id = Column(String, unique=True, nullable=False, index=True)  # sub del proveedor (Clerk)
    email = Column(String, unique=True, nullable=False)
    firstname = Column(String)
    lastname = Column(String)
    image = Column(String)
    # ciclo users <-> cosmos: se setea después de crear el cosmos
    active_cosmos_id = Column(
        String,
        ForeignKey("cosmos.id", use_alter=True, name="fk_users_active_cosmos", ondelete="SET NULL"),
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    studio = relationship("Studio", back_populates="user", uselist=False, cascade="all, delete-orphan")
    subscription = relationship("Subscription", back_populates="user", uselist=False, cascade="all, delete-orphan")
    workspace = relationship("Workspace", back_populates="user", cascade="all, delete-orphan")
    cosmos = relationship(
        "Cosmos", back_populates="user", foreign_keys="Cosmos.user_id", cascade="all, delete-orphan"
    )
    active_cosmos = relationship("Cosmos", foreign_keys=[active_cosmos_id], post_update=True)


class Studio(Base):
    __tablename__ = "studios"
    id = Column(String, primary_key=True, default=id_factory("std"))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    preset = Column(Enum(Preset), nullable=False, default=Preset.SD)
    screen = Column(String)
    mic = Column(String)
    camera = Column(String)

    user = relationship("User", back_populates="studio")


class Subscription(Base):
    __tablename__ = "subscriptions"
    id = Column(String, primary_key=True, default=id_factory("sub"))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    plan = Column(Enum(Plan), nullable=False, default=Plan.FREE)
    customer_id = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="subscription")


class Workspace(Base):
    __tablename__ = "workspaces"
    id = Column(String, primary_key=True, default=id_factory("wsp"))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    type = Column(Enum(WorkspaceType), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="workspace")
