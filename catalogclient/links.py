"""
PA:GET_FROM_URL("url") link directives embedded in catalog resources.

A resource may reference other remote content with either quote style:

    PA:GET_FROM_URL("http://host/path")
    PA:GET_FROM_URL(&quot;http://host/path&quot;)

resolve_links() replaces each directive with the text fetched from its URL,
one directive at a time, rescanning the rewritten text after every
substitution so that directives brought in by fetched content are resolved too.
"""

import re
from typing import Callable, Optional

import structlog

from .errors import LinkResolutionError

logger = structlog.get_logger(__name__)

GET_FROM_URL = "PA:GET_FROM_URL"

QUOTE = '"'
HTML_QUOTE = "&quot;"

# Any character but a line terminator, shortest match
_URL_REGEX = r"([^\n\r\u0085\u2028\u2029]*?)"
_CATCH_URL_REGEX = QUOTE + _URL_REGEX + QUOTE
_CATCH_URL_REGEX_WITH_HTML_QUOTE = HTML_QUOTE + _URL_REGEX + HTML_QUOTE

GET_FROM_URL_PATTERN = re.compile(
    re.escape(GET_FROM_URL) + r"\(((" + _CATCH_URL_REGEX + ")|(" + _CATCH_URL_REGEX_WITH_HTML_QUOTE + r"))\)"
)


def extract_url_from_token(token: str) -> str:
    """Return the URL quoted inside a full PA:GET_FROM_URL(...) token."""
    if token.endswith(QUOTE + ")"):
        prefix = GET_FROM_URL + "(" + QUOTE
        suffix = QUOTE + ")"
    elif token.endswith(HTML_QUOTE + ")"):
        prefix = GET_FROM_URL + "(" + HTML_QUOTE
        suffix = HTML_QUOTE + ")"
    else:
        raise ValueError(f"Not a {GET_FROM_URL} token: {token!r}")

    if not token.startswith(prefix) or len(token) < len(prefix) + len(suffix):
        raise ValueError(f"Not a {GET_FROM_URL} token: {token!r}")
    return token[len(prefix):len(token) - len(suffix)]


def resolve_links(text: str, fetch: Callable[[str], str], max_substitutions: Optional[int] = None) -> str:
    """Substitute every link directive in text with the content fetch(url) returns.

    Args:
        text: Resource content that may contain link directives.
        fetch: Called with each extracted URL, returns the replacement text.
        max_substitutions: Stop with LinkResolutionError once this many
            directives were replaced and another one remains. None means
            no limit, in which case cyclic references never terminate.

    Returns:
        The text with no directive left in it.
    """
    substitutions = 0
    match = GET_FROM_URL_PATTERN.search(text)
    while match:
        url = extract_url_from_token(match.group())
        if max_substitutions is not None and substitutions >= max_substitutions:
            logger.warning("link_resolution_limit_reached", limit=max_substitutions, url=url)
            raise LinkResolutionError(max_substitutions, url)

        content = fetch(url)
        # Plain slicing: fetched content may contain "\1" or "\g<0>" and must stay literal
        text = text[:match.start()] + content + text[match.end():]
        substitutions += 1
        logger.debug("link_resolved", url=url, content_length=len(content), substitutions=substitutions)

        match = GET_FROM_URL_PATTERN.search(text)

    return text
