# re-export common schemas for simpler imports
from .ShortUrlOptions import ShortUrlOptions, CreateShortUrlOptions
from .URLCreateRequest import URLCreateRequest
from .URLInfoResponse import URLInfoResponse
from .URLResolveResponse import URLResolveResponse

__all__ = [
    "ShortUrlOptions",
    "CreateShortUrlOptions",
    "URLCreateRequest",
    "URLInfoResponse",
    "URLResolveResponse",
]
