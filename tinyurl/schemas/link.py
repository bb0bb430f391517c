from pydantic import BaseModel
from datetime import datetime


# Request DTOs
class LinkCreateRequest(BaseModel):
    # Validated by the store so the API and the form report the same messages
    url: str


# Response DTOs
class LinkInfoResponse(BaseModel):
    code: str
    short_url: str
    url: str
    view_count: int
    created_at: datetime

    model_config = {"from_attributes": True}
