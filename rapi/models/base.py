from pydantic import BaseModel, ConfigDict

__all__ = ("Model",)


class Model(BaseModel):
    """Base class for every wire model. Fields are named the Python way
    and carry the server's name as their alias; both are accepted when
    building a model by hand.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")
