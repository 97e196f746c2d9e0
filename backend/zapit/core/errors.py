"""Error conditions raised by the ingestion and feed services.

Routes map these to status codes; the services never format responses.
"""

from __future__ import annotations


class ZapItError(Exception):
    """Base class for every condition the core reports."""


class InvalidSubmission(ZapItError):
    """A submitted field failed validation; nothing was written."""


class InvalidLink(InvalidSubmission):
    """The submitted link is not an absolute, well-formed URL."""

    def __init__(self, link: str, reason: str = "not an absolute URL") -> None:
        super().__init__(f"invalid link {link!r}: {reason}")
        self.link = link
        self.reason = reason


class InvalidTitle(InvalidSubmission):
    """The title cannot be carried in an XML feed."""

    def __init__(self, title: str, reason: str) -> None:
        super().__init__(f"invalid title {title!r}: {reason}")
        self.title = title
        self.reason = reason


class InvalidPubDate(InvalidSubmission):
    """The publication date cannot be represented in UTC."""

    def __init__(self, value, reason: str = "out of range") -> None:
        super().__init__(f"invalid pub_date {value!r}: {reason}")
        self.value = value
        self.reason = reason


class DuplicateLink(ZapItError):
    """The link is already stored."""

    def __init__(self, link: str) -> None:
        super().__init__(f"link already stored: {link}")
        self.link = link


class InternalStoreError(ZapItError):
    """The store failed for a reason other than a duplicate link.

    The original driver exception is kept as ``__cause__``.
    """
