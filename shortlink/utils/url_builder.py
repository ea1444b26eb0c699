import re
from typing import Optional, Union

from shortlink.schemas.ShortUrlOptions import ShortUrlOptions
from shortlink.utils.encoding import encode_id

_SCHEME_RE = re.compile(r"^https?://")


def build_short_url(identifier: int, options: Union[ShortUrlOptions, str, None] = None) -> str:
    """Assemble [protocol://]domain[/segment]/code from an identifier."""
    opts = ShortUrlOptions.merge(options)
    short_code = encode_id(identifier)

    url = ""
    if opts.include_protocol and opts.protocol:
        url += f"{opts.protocol}://"
    url += opts.domain
    if opts.include_redirect_path and opts.redirect_path_segment:
        url += f"{opts.path_separator}{opts.redirect_path_segment}"
    url += f"{opts.path_separator}{short_code}"
    return url


def extract_short_code(short_url: str, path_separator: Optional[str] = "/") -> str:
    """Return the last path segment of a short URL, ignoring an http(s) scheme."""
    without_scheme = _SCHEME_RE.sub("", short_url.strip())
    return without_scheme.split(path_separator or "/")[-1]
