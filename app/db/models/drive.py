from sqlalchemy import Column, String, Integer, BigInteger, Boolean, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.utils.ids import id_factory

class StellarDrive(Base):
    __tablename__ = "stellar_drives"
    id = Column(String, primary_key=True, default=id_factory("drv"))
    cosmos_id = Column(String, ForeignKey("cosmos.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    capacity = Column(BigInteger, nullable=False)   # bytes
    used = Column(BigInteger, nullable=False, default=0)
    settings = Column(JSON, default=dict)           # defaultView / sortBy / showHidden
    # ciclo drive <-> root folder
    root_folder_id = Column(
        String,
        ForeignKey("stellar_folders.id", use_alter=True, name="fk_drives_root_folder", ondelete="SET NULL"),
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    cosmos = relationship("Cosmos", back_populates="drives")
    folders = relationship(
        "StellarFolder", back_populates="drive", foreign_keys="StellarFolder.drive_id", cascade="all, delete-orphan"
    )
    root_folder = relationship("StellarFolder", foreign_keys=[root_folder_id], post_update=True)


class StellarFolder(Base):
    __tablename__ = "stellar_folders"
    id = Column(String, primary_key=True, default=id_factory("fld"))
    drive_id = Column(String, ForeignKey("stellar_drives.id", ondelete="CASCADE"), nullable=False)
    parent_id = Column(String, ForeignKey("stellar_folders.id", ondelete="CASCADE"))
    name = Column(String, nullable=False)
    in_sidebar = Column(Boolean, default=False)
    sidebar_order = Column(Integer)
    position = Column(JSON)                          # {"x": .., "y": ..}
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    drive = relationship("StellarDrive", back_populates="folders", foreign_keys=[drive_id])
    parent = relationship("StellarFolder", remote_side=[id], back_populates="children")
    children = relationship("StellarFolder", back_populates="parent")
