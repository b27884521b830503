from pydantic import BaseModel, ConfigDict


class Reputation(BaseModel):
    """
    Opaque reputation record owned by an arbitrator.

    Scoring lives elsewhere; whatever fields a scorer attaches are carried
    through persistence untouched.
    """

    model_config = ConfigDict(extra="allow")
