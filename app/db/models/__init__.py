# importa todos los modelos para que Base.metadata los registre
from app.db.models.user import User, Studio, Subscription, Workspace
from app.db.models.cosmos import Cosmos, CosmosMember
from app.db.models.drive import StellarDrive, StellarFolder
from app.db.models.aura import Aura, Aurora, Stream, Flow, FlowComponent
from app.db.models.constellation import Constellation, DockConfig, DockItem, AppState
from app.db.models.enums import Preset, Plan, WorkspaceType, FlowType, ComponentType

__all__ = [
    "User", "Studio", "Subscription", "Workspace",
    "Cosmos", "CosmosMember",
    "StellarDrive", "StellarFolder",
    "Aura", "Aurora", "Stream", "Flow", "FlowComponent",
    "Constellation", "DockConfig", "DockItem", "AppState",
    "Preset", "Plan", "WorkspaceType", "FlowType", "ComponentType",
]
