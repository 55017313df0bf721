from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LinkToken(BaseModel):
    """Short-lived token the browser uses to open the aggregator's link flow."""

    link_token: str
    expiration: datetime

    model_config = ConfigDict(frozen=True)


class TokenExchange(BaseModel):
    """Result of exchanging a public token. The access token never leaves the server."""

    item_id: str
    access_token: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)
