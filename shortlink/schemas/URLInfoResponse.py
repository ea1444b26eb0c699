from pydantic import BaseModel, Field

# Response DTOs
class URLInfoResponse(BaseModel):
    original_url: str = Field(..., alias="url")
    short_url: str
    short_code: str
    identifier: int

    model_config = {"populate_by_name": True}
