from pydantic import BaseModel, Field


class URLResolveResponse(BaseModel):
    original_url: str = Field(..., alias="url")
    short_url: str

    model_config = {"populate_by_name": True}
