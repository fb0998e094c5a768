import enum


class Preset(str, enum.Enum):
    HD = "HD"
    SD = "SD"


class Plan(str, enum.Enum):
    FREE = "FREE"
    PRO = "PRO"


class WorkspaceType(str, enum.Enum):
    PERSONAL = "PERSONAL"
    PUBLIC = "PUBLIC"


class FlowType(str, enum.Enum):
    CORE = "CORE"
    CONFIG = "CONFIG"


class ComponentType(str, enum.Enum):
    COLOR = "COLOR"
    TYPOGRAPHY = "TYPOGRAPHY"
    WALLPAPER = "WALLPAPER"
    DOCK_ICON = "DOCK_ICON"
    CURSOR = "CURSOR"
