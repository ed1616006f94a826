"""
Transfer and backup documents.

Two JSON document kinds, both versioned (current version: 1):

  ``.bouquet``  whole-collection backup (``BouquetDocument``)
  ``.flower``   one flower gifted to another device (``FlowerDocument``)

Backup integrity: the metadata carries ``total_flowers`` and a checksum, the
SHA-256 hex digest of the sorted flower id strings concatenated. Import
checks, in order: parseable JSON, supported version, an id on every flower
record, checksum, count, and finally the full schema. The checksum is
computed from the raw id strings in the file, so any edit to an id is
reported as an integrity failure rather than a parse error.

Gift transfer: exporting appends the sender to the flower's ownership chain
and issues a one-time ``transfer_token``. Importing requires the token and
clears it. ``read_flower_file`` rewrites the file with the token cleared,
so the same file cannot be received twice.
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from flower_discovery.exceptions import (
    DuplicateTransfer,
    IntegrityMismatch,
    MalformedTransferDocument,
    NothingToExport,
    VersionUnsupported,
)
from flower_discovery.schemas import (
    BouquetDocument,
    BouquetMetadata,
    Flower,
    FlowerDocument,
    FlowerOwner,
    TransferMetadata,
)
from flower_discovery.store import FileStore, write_atomic

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 1
BOUQUET_SUFFIX = ".bouquet"
FLOWER_SUFFIX = ".flower"

_INVALID_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class DecodedCollection:
    flowers: list[Flower]
    metadata: BouquetMetadata


@dataclass(frozen=True)
class ExportedFlower:
    """Encoded gift document plus the sender-side copy it was built from."""

    data: bytes
    flower: Flower
    transfer_metadata: TransferMetadata


@dataclass(frozen=True)
class ReceivedFlower:
    """A successfully received gift.

    ``consumed_document`` is the same document with the token cleared; store
    it in place of the original to make the file unusable a second time.
    """

    flower: Flower
    sender: FlowerOwner
    consumed_document: bytes


def compute_checksum(flower_ids: Iterable[str]) -> str:
    """SHA-256 hex digest over the sorted, concatenated id strings."""
    joined = "".join(sorted(flower_ids))
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


def checksum_for(flowers: Iterable[Flower]) -> str:
    return compute_checksum(str(f.id) for f in flowers)


def _parse_envelope(data: bytes | str) -> dict[str, Any]:
    """Parse JSON and enforce the version ceiling before any schema checks."""
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        msg = f"Invalid document format: {err}"
        raise MalformedTransferDocument(msg) from err
    if not isinstance(raw, dict):
        msg = "Invalid document format: expected a JSON object"
        raise MalformedTransferDocument(msg)

    version = raw.get("version", 1)
    if not isinstance(version, int) or isinstance(version, bool):
        msg = f"Invalid document version: {version!r}"
        raise MalformedTransferDocument(msg)
    if version > SUPPORTED_VERSION:
        raise VersionUnsupported(version, SUPPORTED_VERSION)
    return raw


# =============================================================================
# Whole-collection backups
# =============================================================================


def encode_collection(
    flowers: Sequence[Flower],
    *,
    device_id: str = "unknown",
    device_name: str = "unknown",
    app_version: str = "unknown",
    exporter_name: str | None = None,
    exporter_location: str | None = None,
    now: datetime | None = None,
) -> bytes:
    """Encode a collection as a ``.bouquet`` document.

    Raises:
        NothingToExport: If ``flowers`` is empty.
    """
    if not flowers:
        raise NothingToExport

    metadata = BouquetMetadata(
        export_date=now or datetime.now(UTC),
        device_id=device_id,
        device_name=device_name,
        app_version=app_version,
        total_flowers=len(flowers),
        exporter_name=exporter_name,
        exporter_location=exporter_location,
        checksum=checksum_for(flowers),
    )
    document = BouquetDocument(version=SUPPORTED_VERSION, flowers=list(flowers), metadata=metadata)
    logger.info("Encoded backup of %d flowers", len(flowers))
    return document.model_dump_json(indent=2).encode("utf-8")


def decode_collection(data: bytes | str) -> DecodedCollection:
    """Decode and verify a ``.bouquet`` document.

    Raises:
        MalformedTransferDocument: Not JSON, or does not match the schema.
        VersionUnsupported: Written by a newer format version.
        IntegrityMismatch: Checksum or flower count does not match.
    """
    raw = _parse_envelope(data)

    raw_flowers = raw.get("flowers")
    raw_meta = raw.get("metadata")
    if not isinstance(raw_flowers, list) or not isinstance(raw_meta, dict):
        msg = "Invalid backup format: missing flowers or metadata"
        raise MalformedTransferDocument(msg)

    if not all(isinstance(item, dict) and "id" in item for item in raw_flowers):
        msg = "Invalid backup format: every flower record needs an id"
        raise MalformedTransferDocument(msg)

    ids = [str(item["id"]) for item in raw_flowers]
    if compute_checksum(ids) != raw_meta.get("checksum"):
        msg = "Checksum mismatch - backup file may be corrupted"
        raise IntegrityMismatch(msg)

    declared = raw_meta.get("total_flowers")
    if declared != len(raw_flowers):
        msg = f"Flower count mismatch: expected {declared}, found {len(raw_flowers)}"
        raise IntegrityMismatch(msg)

    try:
        document = BouquetDocument.model_validate_json(data)
    except ValidationError as err:
        msg = f"Invalid backup format: {err.error_count()} validation error(s)"
        raise MalformedTransferDocument(msg) from err

    logger.info(
        "Verified backup of %d flowers from device %s (%s)",
        len(document.flowers),
        document.metadata.device_name,
        document.metadata.export_date.isoformat(),
    )
    return DecodedCollection(flowers=document.flowers, metadata=document.metadata)


def backup_filename(now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y-%m-%d_%H-%M")
    return f"FlowerCollection_{stamp}{BOUQUET_SUFFIX}"


def write_collection_file(
    directory: Path,
    flowers: Sequence[Flower],
    *,
    now: datetime | None = None,
    **metadata: Any,
) -> Path:
    """Encode ``flowers`` and write them atomically to ``directory``."""
    data = encode_collection(flowers, now=now, **metadata)
    name = backup_filename(now)
    FileStore(directory).set(name, data)
    path = directory / name
    logger.info("Wrote backup %s (%d bytes)", path, len(data))
    return path


def read_collection_file(path: Path) -> DecodedCollection:
    try:
        data = path.read_bytes()
    except OSError as err:
        msg = f"Could not read backup file {path.name}: {err}"
        raise MalformedTransferDocument(msg) from err
    return decode_collection(data)


def cleanup_old_backups(directory: Path, keep: int = 5) -> list[Path]:
    """Delete all but the ``keep`` newest ``.bouquet`` files; return what was removed."""
    if not directory.exists():
        return []
    backups = sorted(
        directory.glob(f"*{BOUQUET_SUFFIX}"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )
    removed: list[Path] = []
    for path in backups[keep:]:
        path.unlink(missing_ok=True)
        removed.append(path)
        logger.info("Removed old backup %s", path.name)
    return removed


# =============================================================================
# Single-flower gifts
# =============================================================================


def export_flower(flower: Flower, sender: FlowerOwner) -> ExportedFlower:
    """Prepare a copy of ``flower`` for gifting and encode it.

    The input flower is not modified; the returned ``flower`` is the
    sender-side copy with the updated ownership chain and fresh token.
    """
    prepared = flower.model_copy(deep=True)
    metadata = prepared.prepare_for_transfer(sender)
    document = FlowerDocument(
        version=SUPPORTED_VERSION, flower=prepared, transfer_metadata=metadata
    )
    logger.info("Exported flower %r from %s", flower.name, sender.name)
    return ExportedFlower(
        data=document.model_dump_json(indent=2).encode("utf-8"),
        flower=prepared,
        transfer_metadata=metadata,
    )


def import_flower(data: bytes | str) -> ReceivedFlower:
    """Decode a gift document and consume its one-time token.

    Raises:
        MalformedTransferDocument: Not a valid flower document.
        VersionUnsupported: Written by a newer format version.
        DuplicateTransfer: The token was already consumed.
    """
    _parse_envelope(data)
    try:
        document = FlowerDocument.model_validate_json(data)
    except ValidationError as err:
        msg = f"Invalid flower document: {err.error_count()} validation error(s)"
        raise MalformedTransferDocument(msg) from err

    if not document.flower.transfer_token:
        raise DuplicateTransfer

    received = document.flower.model_copy(deep=True)
    received.complete_transfer()

    consumed = document.model_copy(update={"flower": received})
    logger.info(
        "Received flower %r from %s", received.name, document.transfer_metadata.sender.name
    )
    return ReceivedFlower(
        flower=received,
        sender=document.transfer_metadata.sender,
        consumed_document=consumed.model_dump_json(indent=2).encode("utf-8"),
    )


def sanitize_filename(name: str) -> str:
    """``"Damask Rose / Gift"`` -> ``"Damask_Rose_Gift"``."""
    cleaned = _INVALID_FILENAME_CHARS.sub("_", name).strip("._-")
    return cleaned or "flower"


def write_flower_file(directory: Path, flower: Flower, sender: FlowerOwner) -> tuple[Path, Flower]:
    """Export ``flower`` to ``<name>.flower`` in ``directory``."""
    exported = export_flower(flower, sender)
    name = f"{sanitize_filename(flower.name)}{FLOWER_SUFFIX}"
    FileStore(directory).set(name, exported.data)
    return directory / name, exported.flower


def read_flower_file(
    path: Path, accept: Callable[[Flower], object] | None = None
) -> ReceivedFlower:
    """Receive the flower in ``path`` and mark the file as consumed.

    ``accept`` (e.g. ``CollectionStore.add``) is called with the received
    flower before the file is rewritten. If it raises, the file keeps its
    token and can be received again.
    """
    try:
        data = path.read_bytes()
    except OSError as err:
        msg = f"Could not read flower file {path.name}: {err}"
        raise MalformedTransferDocument(msg) from err
    received = import_flower(data)
    if accept is not None:
        accept(received.flower)
    write_atomic(path, received.consumed_document)
    return received
