from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    """Registration and profile update body.

    Fields default to empty and ``email`` is a plain string: presence and
    the coarse email shape are checked by the validator, which reports
    failures as BadRequest rather than a 422 from request parsing.
    """
    name: str = ""
    email: str = ""

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    created_at: int
    updated_at: int
