"""Default records seeded for every new user."""

from app.db.models.enums import ComponentType

DRIVE_CAPACITY = 1_000_000_000  # 1GB
DRIVE_SETTINGS = {"defaultView": "grid", "sortBy": "name", "showHidden": False}

GRID_SPACING = 100
INITIAL_OFFSET = 50
STANDARD_FOLDERS = [
    {
        "name": name,
        "in_sidebar": True,
        "sidebar_order": i,
        "position": {"x": INITIAL_OFFSET + GRID_SPACING * i, "y": INITIAL_OFFSET},
    }
    for i, name in enumerate(["Desktop", "Documents", "Downloads", "Pictures"])
]

# Tokens del flow CORE ("Zenith"): (name, hex, opacity)
_COLOR_TOKENS = [
    ("black", "#000000", 100),
    ("graphite", "#292929", 100),
    ("smoke", "#CCCCCC", 100),
    ("latte", "#4C4F69", 100),

    ("black-thick", "#000000", 81),
    ("black-med", "#000000", 72),
    ("black-thin", "#000000", 54),
    ("black-glass", "#000000", 30),

    ("graphite-thick", "#292929", 81),
    ("graphite-med", "#292929", 72),
    ("graphite-thin", "#292929", 54),
    ("graphite-glass", "#292929", 30),

    ("smoke-thick", "#CCCCCC", 81),
    ("smoke-med", "#CCCCCC", 72),
    ("smoke-thin", "#CCCCCC", 54),
    ("smoke-glass", "#CCCCCC", 30),

    ("latte-thick", "#4C4F69", 81),
    ("latte-med", "#4C4F69", 72),
    ("latte-thin", "#4C4F69", 54),
    ("latte-glass", "#4C4F69", 30),

    ("daimon", "#694C4C", 100),
    ("onyx", "#5E4C69", 100),
    ("mariana", "#4C6957", 100),

    # colores internos/externos del cursor
    ("latte-inner", "#1E202A", 100),
    ("latte-outer", "#4C4F69", 100),
    ("daimon-inner", "#281719", 100),
    ("daimon-outer", "#5F3A3E", 100),
    ("onyx-inner", "#262331", 100),
    ("onyx-outer", "#534C6A", 100),
    ("mariana-inner", "#152020", 100),
    ("mariana-outer", "#375454", 100),
]

_TYPOGRAPHY_TOKENS = [
    ("exemplar", "ExemplarPro"),
    ("dank", "Dank Mono"),
    ("inter", "Inter"),
]

CORE_COMPONENTS = [
    {"name": name, "type": ComponentType.COLOR, "value": value, "opacity": opacity}
    for name, value, opacity in _COLOR_TOKENS
] + [
    {"name": name, "type": ComponentType.TYPOGRAPHY, "font_family": family}
    for name, family in _TYPOGRAPHY_TOKENS
]
# order arranca en 1 para el flow CORE
for _i, _c in enumerate(CORE_COMPONENTS, start=1):
    _c["order"] = _i

def _dock_icon(name, token="black", outline="latte-med"):
    return {
        "name": name,
        "type": ComponentType.DOCK_ICON,
        "mode": "color",
        "token_id": token,
        "outline_mode": "color",
        "outline_token_id": outline,
    }

# Flow CONFIG de Orion ("Zenithn"); los token_id apuntan a nombres del flow CORE
CONFIG_COMPONENTS = [
    {"name": "Wallpaper", "type": ComponentType.WALLPAPER, "mode": "color", "token_id": "black"},
    _dock_icon("Finder", outline="latte"),
    _dock_icon("Flow", outline="latte"),
    _dock_icon("Discord"),
    _dock_icon("Anki"),
    _dock_icon("Stellar", token="latte", outline="black"),
    _dock_icon("Terminal"),
    _dock_icon("Settings"),
    _dock_icon("GitHub"),
    {
        "name": "Cursor",
        "type": ComponentType.CURSOR,
        "mode": "color",
        "token_id": "black",
        "outline_mode": "color",
        "outline_token_id": "latte-outer",
    },
]
for _i, _c in enumerate(CONFIG_COMPONENTS):
    _c["order"] = _i

# (app_id, nombre del componente en el flow CONFIG)
DOCK_PINS = [("stellar", "Stellar"), ("flow", "Flow")]

ORION_APP_ID = "orion"
INITIAL_APP_STATE = {"navState": "home", "theme": "dark"}
