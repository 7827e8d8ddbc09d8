"""Pipeline error taxonomy."""

from __future__ import annotations


class AtlasError(RuntimeError):
    """Base class for recoverable pipeline failures."""


class UpstreamCallFailure(AtlasError):
    """The model endpoint could not be reached or refused the call.

    Covers network errors, timeouts, auth and quota rejections, and a missing
    API key.
    """


class ParseFailure(AtlasError):
    """The model response did not match the expected shape."""
