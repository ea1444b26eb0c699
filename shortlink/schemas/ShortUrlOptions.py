from pydantic import BaseModel, Field
from typing import Callable, Optional, Union

DEFAULT_DOMAIN = "short.url"


class ShortUrlOptions(BaseModel):
    """How a short code is assembled into a short URL."""

    model_config = {"frozen": True}

    domain: str = DEFAULT_DOMAIN
    include_redirect_path: bool = True
    redirect_path_segment: str = "r"
    include_protocol: bool = False
    protocol: str = "https"
    path_separator: str = Field("/", min_length=1)

    @classmethod
    def merge(cls, domain_or_options: Union[str, "ShortUrlOptions", dict, None] = None,
              base: Optional["ShortUrlOptions"] = None, **overrides):
        """Merge user overrides onto base (or the defaults).

        A bare string is taken as the domain. An empty domain falls back
        to the base domain.
        """
        base = base or cls()
        update = {}
        if isinstance(domain_or_options, str):
            update["domain"] = domain_or_options
        elif isinstance(domain_or_options, BaseModel):
            update.update(domain_or_options.model_dump(exclude_unset=True))
        elif domain_or_options:
            update.update(domain_or_options)
        update.update({k: v for k, v in overrides.items() if v is not None})
        if not update.get("domain", base.domain):
            update["domain"] = base.domain
        return cls(**{**base.model_dump(), **{k: v for k, v in update.items() if k in cls.model_fields}})


class CreateShortUrlOptions(ShortUrlOptions):
    hash_algorithm: Union[str, Callable[[str], int]] = "djb2"
    custom_hash_fn: Optional[Callable[[str], int]] = None
