from pydantic import BaseModel

class Principal(BaseModel):
    """Usuario de la sesión actual, tal como lo entrega el proveedor de identidad."""
    external_id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None

    @classmethod
    def from_claims(cls, claims: dict) -> "Principal":
        email = claims.get("email")
        if not email and claims.get("email_addresses"):
            first = claims["email_addresses"][0]
            email = first.get("email_address") if isinstance(first, dict) else first
        return cls(
            external_id=claims["sub"],
            email=email,
            first_name=claims.get("first_name") or claims.get("given_name"),
            last_name=claims.get("last_name") or claims.get("family_name"),
            image_url=claims.get("image_url") or claims.get("picture"),
        )
