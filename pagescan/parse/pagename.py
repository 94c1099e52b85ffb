"""Page name lookup.

Pages from the site declare their name in a script comment, e.g.
``<!-- var pageName = "View Item"; -->``.
"""

from __future__ import annotations

import logging

from .source import ByteSource
from .tags import iter_tags

logger = logging.getLogger(__name__)

PAGENAME_PREFIX = b'var pageName = "'


def page_name_from_tag(tag: bytes) -> bytes | None:
    """Return the quoted page name declared in ``tag``, if any."""
    start = tag.find(PAGENAME_PREFIX)
    if start < 0:
        return None
    start += len(PAGENAME_PREFIX)
    end = tag.find(b'"', start)
    if end < 0:
        logger.debug("page_name_from_tag(): no trailing quote in %r", tag[start:])
        return None
    return tag[start:end]


def get_page_name(source: ByteSource) -> bytes | None:
    """Return the page name from the first comment declaring one.

    Only comment tags are searched; the scan stops at the first comment that
    contains the declaration, even if its value is unterminated.
    """
    for tag in iter_tags(source):
        if not tag.startswith(b"!--"):
            continue
        if PAGENAME_PREFIX in tag:
            name = page_name_from_tag(tag)
            logger.debug("get_page_name(): pagename = %r", name)
            return name
    logger.debug("get_page_name(): cannot find pagename")
    return None
