from uuid import uuid4


def new_id(prefix: str | None = None) -> str:
    """Id corto con prefijo legible, ej: 'usr_3f2a...'"""
    raw = uuid4().hex
    return f"{prefix}_{raw}" if prefix else raw


def id_factory(prefix: str):
    # para usar como default= en columnas
    return lambda: new_id(prefix)
