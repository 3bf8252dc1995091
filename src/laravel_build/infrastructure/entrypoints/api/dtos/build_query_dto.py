from pydantic import BaseModel, ConfigDict, Field


class BuildQueryDTO(BaseModel):
    """Query string of a build request.

    ``php`` and ``services`` are None when the parameter was not sent at all;
    an explicitly empty value stays an empty string.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    php: str | None = None
    services: str | None = Field(default=None, alias="with")
    pest: bool = False
    devcontainer: bool = False
