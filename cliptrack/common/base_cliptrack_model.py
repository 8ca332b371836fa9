from pydantic import BaseModel, ConfigDict


class BaseCliptrackModel(BaseModel):
    """Base Pydantic model for the cliptrack project.

    Provides defaults specific to our codebase and makes global changes easier.
    Models are frozen: edits always produce new instances.
    """

    model_config = ConfigDict(
        frozen=True,
        revalidate_instances="always",
        validate_assignment=True,
        populate_by_name=True,
    )
