"""Error taxonomy for the discovery engine.

Selection, transfer and provider failures each get their own branch so
callers can decide what is recoverable:

    FlowerDiscoveryError
    ├── SelectionExhausted        every species already discovered
    ├── TransferError
    │   ├── MalformedTransferDocument
    │   ├── VersionUnsupported
    │   ├── IntegrityMismatch
    │   ├── DuplicateTransfer
    │   └── NothingToExport
    └── ProviderFailure
        ├── InvalidKey
        ├── NetworkFailure
        └── NoResult
"""

from __future__ import annotations


class FlowerDiscoveryError(Exception):
    """Base class for all errors raised by this package."""


class SelectionExhausted(FlowerDiscoveryError):
    """No eligible species remain after exclusions."""

    def __init__(self, excluded_count: int) -> None:
        self.excluded_count = excluded_count
        super().__init__(f"No species left to discover ({excluded_count} already excluded)")


# =============================================================================
# Transfer / backup
# =============================================================================


class TransferError(FlowerDiscoveryError):
    """Base class for transfer and backup document errors."""


class MalformedTransferDocument(TransferError):
    """The document could not be parsed."""


class VersionUnsupported(TransferError):
    """The document was written by a newer format version."""

    def __init__(self, version: int, supported: int) -> None:
        self.version = version
        self.supported = supported
        super().__init__(
            f"Document version {version} is not supported (highest supported: {supported})"
        )


class IntegrityMismatch(TransferError):
    """Checksum or record count does not match the payload."""


class DuplicateTransfer(TransferError):
    """The flower's one-time transfer token has already been consumed."""

    def __init__(self) -> None:
        super().__init__("This flower has already been received")


class NothingToExport(TransferError):
    """An export was requested for an empty collection."""

    def __init__(self) -> None:
        super().__init__("No flowers found to back up")


# =============================================================================
# External collaborators
# =============================================================================


class ProviderFailure(FlowerDiscoveryError):
    """An image, detail, location or weather provider failed."""


class InvalidKey(ProviderFailure):
    """The provider rejected the configured API key."""


class NetworkFailure(ProviderFailure):
    """The provider could not be reached or timed out."""


class NoResult(ProviderFailure):
    """The provider answered but produced nothing usable."""
