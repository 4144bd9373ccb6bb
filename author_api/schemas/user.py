from pydantic import BaseModel, Field


class UserModel(BaseModel):  # type: ignore[misc]
    """
    Authenticated caller decoded from a Keycloak access token.

    Exposes the attributes Starlette expects from `request.user`
    (`is_authenticated`, `display_name`, `identity`).
    """

    id: str = Field(..., alias="sub")
    expired_in: int = Field(
        ..., alias="exp"
    )  # timestamp when keycloak session expires
    username: str = Field(..., alias="preferred_username")
    roles: list[str] = []

    def __init__(self, **kwargs) -> None:  # type: ignore[no-untyped-def]
        # Get client roles
        kwargs["roles"] = (
            kwargs.get("resource_access", {})
            .get(kwargs["azp"], {})
            .get("roles", [])
        )

        super(UserModel, self).__init__(**kwargs)

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def display_name(self) -> str:
        return self.username

    @property
    def identity(self) -> str:
        return self.id

    def __hash__(self) -> int:
        return hash(self.id)
