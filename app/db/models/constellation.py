from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.utils.ids import id_factory

class Constellation(Base):
    __tablename__ = "constellations"
    id = Column(String, primary_key=True, default=id_factory("cst"))
    cosmos_id = Column(String, ForeignKey("cosmos.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    cosmos = relationship("Cosmos", back_populates="constellations")
    dock_config = relationship("DockConfig", back_populates="constellation", uselist=False, cascade="all, delete-orphan")
    app_states = relationship("AppState", back_populates="constellation", cascade="all, delete-orphan")


class DockConfig(Base):
    __tablename__ = "dock_configs"
    id = Column(String, primary_key=True, default=id_factory("dck"))
    constellation_id = Column(String, ForeignKey("constellations.id", ondelete="CASCADE"), unique=True, nullable=False)

    constellation = relationship("Constellation", back_populates="dock_config")
    items = relationship("DockItem", back_populates="dock_config", cascade="all, delete-orphan", order_by="DockItem.position")


class DockItem(Base):
    __tablename__ = "dock_items"
    id = Column(String, primary_key=True, default=id_factory("dit"))
    dock_config_id = Column(String, ForeignKey("dock_configs.id", ondelete="CASCADE"), nullable=False)
    app_id = Column(String, nullable=False)
    position = Column(Integer, nullable=False)
    flow_component_id = Column(String, ForeignKey("flow_components.id", ondelete="SET NULL"))

    dock_config = relationship("DockConfig", back_populates="items")
    flow_component = relationship("FlowComponent")


class AppState(Base):
    __tablename__ = "app_states"
    id = Column(String, primary_key=True, default=id_factory("app"))
    constellation_id = Column(String, ForeignKey("constellations.id", ondelete="CASCADE"), nullable=False)
    app_id = Column(String, nullable=False)
    active_flow_id = Column(String, ForeignKey("flows.id", ondelete="SET NULL"))
    state_data = Column(JSON, default=dict)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    constellation = relationship("Constellation", back_populates="app_states")
