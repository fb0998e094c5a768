"""Ordered steps that seed the default Cosmos graph for a new user.

Every step runs on the same session/transaction and returns the ids the next
steps need. Nothing is committed here; the caller wraps ``seed_default_graph``
in ``atomic()`` so a failure in any step leaves no rows behind.
"""
from dataclasses import dataclass
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import (
    User, Studio, Subscription, Workspace, Cosmos,
    StellarDrive, StellarFolder,
    Constellation, Aura, Aurora, Stream, Flow, FlowComponent,
    DockConfig, DockItem, AppState,
    Preset, Plan, WorkspaceType, FlowType,
)
from app.schemas.principal import Principal
from app.services import catalog

@dataclass
class SeededIds:
    user_id: str
    cosmos_id: str
    drive_id: str
    root_folder_id: str
    constellation_id: str
    aura_id: str
    aurora_id: str
    core_stream_id: str
    config_stream_id: str
    core_flow_id: str
    config_flow_id: str
    dock_config_id: str
    app_state_id: str


async def _add(tx: AsyncSession, obj):
    tx.add(obj)
    await tx.flush()
    return obj


def owner_label(principal: Principal) -> str:
    # nombre para "X's Workspace" / "X's Drive"; sin first_name usa el email
    if principal.first_name:
        return principal.first_name
    if principal.email:
        return principal.email.split("@", 1)[0]
    return "My"


async def create_user(tx: AsyncSession, principal: Principal) -> str:
    user = User(
        external_id=principal.external_id,
        email=principal.email,
        firstname=principal.first_name,
        lastname=principal.last_name,
        image=principal.image_url,
        studio=Studio(preset=Preset.SD),
        subscription=Subscription(plan=Plan.FREE),
        workspace=[Workspace(name=f"{owner_label(principal)}'s Workspace", type=WorkspaceType.PERSONAL)],
    )
    return (await _add(tx, user)).id


async def create_cosmos(tx: AsyncSession, user_id: str) -> str:
    cosmos = await _add(tx, Cosmos(name="Dopa", description="Default Cosmos", user_id=user_id))
    return cosmos.id


async def set_active_cosmos(tx: AsyncSession, user_id: str, cosmos_id: str) -> None:
    user = await tx.get(User, user_id)
    user.active_cosmos_id = cosmos_id
    await tx.flush()


async def create_drive(tx: AsyncSession, cosmos_id: str, principal: Principal) -> str:
    drive = StellarDrive(
        name=f"{owner_label(principal)}'s Drive",
        capacity=catalog.DRIVE_CAPACITY,
        used=0,
        cosmos_id=cosmos_id,
        settings=dict(catalog.DRIVE_SETTINGS),
    )
    return (await _add(tx, drive)).id


async def create_root_folder(tx: AsyncSession, drive_id: str) -> str:
    root = await _add(tx, StellarFolder(name="Root", drive_id=drive_id, position={"x": 0, "y": 0}))
    # back-link drive -> root
    drive = await tx.get(StellarDrive, drive_id)
    drive.root_folder_id = root.id
    await tx.flush()
    return root.id


async def create_standard_folders(tx: AsyncSession, drive_id: str, root_id: str) -> list[str]:
    folders = [
        StellarFolder(
            name=f["name"],
            drive_id=drive_id,
            parent_id=root_id,
            in_sidebar=f["in_sidebar"],
            sidebar_order=f["sidebar_order"],
            position=dict(f["position"]),
        )
        for f in catalog.STANDARD_FOLDERS
    ]
    tx.add_all(folders)
    await tx.flush()
    return [f.id for f in folders]


async def create_constellation(tx: AsyncSession, cosmos_id: str) -> str:
    c = await _add(tx, Constellation(name="Orion", description="Default Constellation", cosmos_id=cosmos_id))
    return c.id


async def create_aura_tree(tx: AsyncSession, cosmos_id: str) -> tuple[str, str, str, str]:
    """Aura -> Aurora -> streams Core y Config. Devuelve (aura, aurora, core, config)."""
    aura = await _add(tx, Aura(name="Noire", description="Default Aura", cosmos_id=cosmos_id))
    aurora = await _add(tx, Aurora(name="Luna", description="Default Aurora", aura_id=aura.id))
    core = await _add(tx, Stream(name="Core", description="Default Core Stream", aurora_id=aurora.id))
    config = await _add(tx, Stream(name="Config", description="Default Orion Config Stream", aurora_id=aurora.id))
    return aura.id, aurora.id, core.id, config.id


async def create_core_flow(tx: AsyncSession, stream_id: str) -> str:
    flow = Flow(
        name="Zenith",
        description="Default Core Flow",
        type=FlowType.CORE,
        stream_id=stream_id,
        components=[FlowComponent(**c) for c in catalog.CORE_COMPONENTS],
    )
    return (await _add(tx, flow)).id


async def create_config_flow(tx: AsyncSession, stream_id: str, core_flow_id: str) -> str:
    flow = Flow(
        name="Zenithn",
        description="Default Orion Config Flow",
        type=FlowType.CONFIG,
        app_id=catalog.ORION_APP_ID,
        stream_id=stream_id,
        references_flow_id=core_flow_id,
        components=[FlowComponent(**c) for c in catalog.CONFIG_COMPONENTS],
    )
    return (await _add(tx, flow)).id


async def find_component_id(tx: AsyncSession, flow_id: str, name: str) -> str | None:
    q = await tx.execute(
        select(FlowComponent.id).where(FlowComponent.flow_id == flow_id, FlowComponent.name == name).limit(1)
    )
    return q.scalar_one_or_none()


async def create_dock_config(tx: AsyncSession, constellation_id: str, config_flow_id: str) -> str:
    items = []
    for position, (app_id, component_name) in enumerate(catalog.DOCK_PINS):
        items.append(
            DockItem(
                app_id=app_id,
                position=position,
                flow_component_id=await find_component_id(tx, config_flow_id, component_name),
            )
        )
    dock = await _add(tx, DockConfig(constellation_id=constellation_id, items=items))
    return dock.id


async def create_app_state(tx: AsyncSession, constellation_id: str, config_flow_id: str) -> str:
    state = AppState(
        app_id=catalog.ORION_APP_ID,
        active_flow_id=config_flow_id,
        constellation_id=constellation_id,
        state_data=dict(catalog.INITIAL_APP_STATE),
    )
    return (await _add(tx, state)).id


async def seed_default_graph(tx: AsyncSession, principal: Principal) -> SeededIds:
    user_id = await create_user(tx, principal)
    cosmos_id = await create_cosmos(tx, user_id)
    await set_active_cosmos(tx, user_id, cosmos_id)

    drive_id = await create_drive(tx, cosmos_id, principal)
    root_id = await create_root_folder(tx, drive_id)
    await create_standard_folders(tx, drive_id, root_id)

    constellation_id = await create_constellation(tx, cosmos_id)
    aura_id, aurora_id, core_stream_id, config_stream_id = await create_aura_tree(tx, cosmos_id)
    core_flow_id = await create_core_flow(tx, core_stream_id)
    config_flow_id = await create_config_flow(tx, config_stream_id, core_flow_id)

    dock_config_id = await create_dock_config(tx, constellation_id, config_flow_id)
    app_state_id = await create_app_state(tx, constellation_id, config_flow_id)

    return SeededIds(
        user_id=user_id,
        cosmos_id=cosmos_id,
        drive_id=drive_id,
        root_folder_id=root_id,
        constellation_id=constellation_id,
        aura_id=aura_id,
        aurora_id=aurora_id,
        core_stream_id=core_stream_id,
        config_stream_id=config_stream_id,
        core_flow_id=core_flow_id,
        config_flow_id=config_flow_id,
        dock_config_id=dock_config_id,
        app_state_id=app_state_id,
    )
