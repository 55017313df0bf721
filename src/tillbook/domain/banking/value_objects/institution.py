from pydantic import BaseModel, ConfigDict


class Institution(BaseModel):
    institution_id: str
    name: str
    logo: str | None = None
    primary_color: str | None = None
    url: str | None = None

    model_config = ConfigDict(frozen=True)
