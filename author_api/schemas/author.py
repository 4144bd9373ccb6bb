from author_api.models.author import Author, AuthorBase


class AuthorIn(AuthorBase):
    """
    Author payload accepted by POST and PUT.

    `id` is optional: creation requires it absent, update uses it to select
    the row to replace.
    """

    id: int | None = None

    def to_entity(self) -> Author:
        return Author(**self.model_dump())


class AuthorRead(AuthorBase):
    """Author as returned to clients."""

    id: int
