from datetime import date

from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel


class AuthorBase(SQLModel):
    """
    Author fields shared by the table model and the API schemas.

    Attributes:
        name: Name of the author
        birth_date: Optional date of birth
        user_id: Keycloak subject id of the owning user
    """

    name: str = Field(min_length=1)
    birth_date: date | None = None
    user_id: str | None = Field(default=None, index=True)


class Author(AuthorBase, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: 64-bit primary key, assigned by the database on first save
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True, sa_type=BigInteger)
