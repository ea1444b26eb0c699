from pydantic import BaseModel, Field, field_validator
from typing import Optional

from shortlink.utils.hashing import available_algorithms

# Request DTOs
class URLCreateRequest(BaseModel):
    # original_url is the Python field, 'url' is the JSON key
    original_url: str = Field(..., alias="url", min_length=1)
    domain: Optional[str] = None
    include_protocol: Optional[bool] = None
    protocol: Optional[str] = None
    include_redirect_path: Optional[bool] = None
    redirect_path_segment: Optional[str] = None
    path_separator: Optional[str] = Field(None, min_length=1)
    hash_algorithm: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator('hash_algorithm')
    def validate_hash_algorithm(cls, v):
        # Custom hash functions can only be supplied in-process
        if v is not None and v not in available_algorithms():
            raise ValueError(f"hash_algorithm must be one of {available_algorithms()}")
        return v

    def option_overrides(self) -> dict:
        return self.model_dump(exclude={"original_url"}, exclude_none=True)
