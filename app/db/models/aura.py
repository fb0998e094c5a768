from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.db.models.enums import FlowType, ComponentType
from app.utils.ids import id_factory

class Aura(Base):
    __tablename__ = "auras"
    id = Column(String, primary_key=True, default=id_factory("aur"))
    cosmos_id = Column(String, ForeignKey("cosmos.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    cosmos = relationship("Cosmos", back_populates="auras")
    auroras = relationship("Aurora", back_populates="aura", cascade="all, delete-orphan")


class Aurora(Base):
    __tablename__ = "auroras"
    id = Column(String, primary_key=True, default=id_factory("aurr"))
    aura_id = Column(String, ForeignKey("auras.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    aura = relationship("Aura", back_populates="auroras")
    streams = relationship("Stream", back_populates="aurora", cascade="all, delete-orphan")


class Stream(Base):
    __tablename__ = "streams"
    id = Column(String, primary_key=True, default=id_factory("str"))
    aurora_id = Column(String, ForeignKey("auroras.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    aurora = relationship("Aurora", back_populates="streams")
    flows = relationship("Flow", back_populates="stream", cascade="all, delete-orphan")


class Flow(Base):
    __tablename__ = "flows"
    id = Column(String, primary_key=True, default=id_factory("flw"))
    stream_id = Column(String, ForeignKey("streams.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(String)
    type = Column(Enum(FlowType), nullable=False)
    app_id = Column(String)                          # solo flows CONFIG, ej: "orion"
    references_flow_id = Column(String, ForeignKey("flows.id", ondelete="SET NULL"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    stream = relationship("Stream", back_populates="flows")
    references_flow = relationship("Flow", remote_side=[id])
    components = relationship(
        "FlowComponent", back_populates="flow", cascade="all, delete-orphan", order_by="FlowComponent.order"
    )


class FlowComponent(Base):
    __tablename__ = "flow_components"
    id = Column(String, primary_key=True, default=id_factory("cmp"))
    flow_id = Column(String, ForeignKey("flows.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    type = Column(Enum(ComponentType), nullable=False)
    value = Column(String)                           # hex para COLOR
    opacity = Column(Integer)
    font_family = Column(String)                     # TYPOGRAPHY
    mode = Column(String)                            # 'color' | 'media'
    token_id = Column(String)                        # nombre del token del flow CORE
    outline_mode = Column(String)
    outline_token_id = Column(String)
    order = Column(Integer, nullable=False)

    flow = relationship("Flow", back_populates="components")
