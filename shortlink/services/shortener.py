from typing import Optional, Union
import logging

from shortlink.core.exceptions import InvalidCharacterError
from shortlink.db.store import URLStore
from shortlink.schemas.ShortUrlOptions import CreateShortUrlOptions, ShortUrlOptions
from shortlink.utils.encoding import decode_short_code
from shortlink.utils.hashing import hash_identifier
from shortlink.utils.url_builder import build_short_url, extract_short_code


logger = logging.getLogger(__name__)


class URLService:
    """Creates short URLs from long ones and resolves them back through a store."""

    def __init__(self, store: URLStore, default_options: Optional[CreateShortUrlOptions] = None):
        self.store = store
        self.default_options = default_options or CreateShortUrlOptions()

    def options_for(self, domain_or_options: Union[str, ShortUrlOptions, dict, None] = None, **overrides) -> CreateShortUrlOptions:
        return CreateShortUrlOptions.merge(domain_or_options, base=self.default_options, **overrides)

    def shorten(self, long_url: str, domain_or_options=None, **overrides):
        """Store the mapping and return (identifier, short_url)."""
        opts = self.options_for(domain_or_options, **overrides)
        identifier = hash_identifier(long_url, opts.hash_algorithm, opts.custom_hash_fn)
        self.store.put(identifier, long_url)
        short_url = build_short_url(identifier, opts)
        logger.info("Shortened %s... to %s", long_url[:50], short_url)
        return identifier, short_url

    def create_short_url(self, long_url: str, domain_or_options=None, **overrides) -> str:
        return self.shorten(long_url, domain_or_options, **overrides)[1]

    def resolve_short_code(self, short_code: str) -> Optional[str]:
        if not short_code:
            logger.warning("Empty short code")
            return None
        try:
            identifier = decode_short_code(short_code)
        except InvalidCharacterError as e:
            logger.warning("Cannot decode short code '%s': %s", short_code, e)
            return None

        original_url = self.store.get(identifier)
        if original_url is None:
            logger.info("No mapping for short code '%s' (identifier %d)", short_code, identifier)
        return original_url

    def decode_url(self, short_url: str, path_separator: str = "/") -> Optional[str]:
        """Return the original URL for short_url, or None if it cannot be resolved.

        Malformed codes and missing mappings are both reported as None.
        """
        return self.resolve_short_code(extract_short_code(short_url, path_separator))
