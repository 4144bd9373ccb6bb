"""
Base command for encapsulating business operations.

The Command pattern encapsulates business logic as objects, so the HTTP
layer only maps results onto status codes and headers, and the logic can be
tested in isolation against fake collaborators.

Example:
    ```python
    class GetAuthorCommand(BaseCommand[int, Author | None]):
        def __init__(self, store: AuthorStore):
            self.store = store

        async def execute(self, input_data: int) -> Author | None:
            return await self.store.find_one(input_data)


    @router.get("/authors/{id}")
    async def get_author(id: int, store: AuthorStoreDep) -> Author:
        return await GetAuthorCommand(store).execute(id)
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands depend on collaborators (store, access context) passed at
    construction and never read them from global state.

    Type Parameters:
        TInput: Input data type.
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            ValidationError: When input violates a precondition.
            Any exception raised by a collaborator propagates unchanged.
        """
        pass
