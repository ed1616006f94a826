"""Tests for .bouquet backups and .flower gifts."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

from flower_discovery import codec
from flower_discovery.exceptions import (
    DuplicateTransfer,
    IntegrityMismatch,
    MalformedTransferDocument,
    NothingToExport,
    VersionUnsupported,
)
from flower_discovery.schemas import Continent, Flower, FlowerOwner, RarityLevel

EXPORTED_AT = datetime(2025, 7, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def rich_flower(make_flower: Callable[..., Flower]) -> Flower:
    """A flower with optional fields and an ownership chain filled in."""
    flower = make_flower(
        "King Protea",
        day=4,
        discovery_date=datetime(2025, 6, 4, 13, 5, tzinfo=UTC),
        image_data=b"\x00\x01binary\xff",
        scientific_name="Protea cynaroides",
        common_names=["King Protea", "Honeypot"],
        rarity_level=RarityLevel.RARE,
        continent=Continent.AFRICA,
        is_favorite=True,
        bouquet_flowers=["protea"],
        discovery_latitude=-33.9,
        discovery_longitude=18.4,
    )
    flower.prepare_for_transfer(FlowerOwner(name="Ada", device_id="phone-1"))
    flower.complete_transfer()
    flower.prepare_for_transfer(FlowerOwner(name="Grace"))
    flower.complete_transfer()
    return flower


class TestChecksum:
    def test_order_independent(self) -> None:
        assert codec.compute_checksum(["b", "a"]) == codec.compute_checksum(["a", "b"])

    def test_known_value(self) -> None:
        # sha256("ab")
        assert codec.compute_checksum(["b", "a"]) == (
            "fb8e20fc2e4c3f248c60c39bd652f3c1347298bb977b8b4d5903b85055620603"
        )


class TestCollectionBackup:
    """encode_collection / decode_collection."""

    def test_roundtrip_preserves_everything(
        self,
        make_flower: Callable[..., Flower],
        rich_flower: Flower,
    ) -> None:
        flowers = [rich_flower, make_flower("Plain", day=2)]
        data = codec.encode_collection(
            flowers, device_id="dev-1", device_name="Pixel", app_version="0.1.0", now=EXPORTED_AT
        )
        decoded = codec.decode_collection(data)

        assert decoded.flowers == flowers
        assert decoded.metadata.total_flowers == 2
        assert decoded.metadata.device_name == "Pixel"
        assert decoded.metadata.export_date == EXPORTED_AT
        assert decoded.metadata.checksum == codec.checksum_for(flowers)

    def test_document_shape(self, make_flower: Callable[..., Flower]) -> None:
        raw = json.loads(codec.encode_collection([make_flower()], now=EXPORTED_AT))
        assert raw["version"] == 1
        assert set(raw) == {"version", "flowers", "metadata"}
        assert raw["metadata"]["total_flowers"] == 1

    def test_empty_collection(self) -> None:
        with pytest.raises(NothingToExport):
            codec.encode_collection([])

    def test_tampered_id_fails_integrity(self, make_flower: Callable[..., Flower]) -> None:
        flower = make_flower()
        data = codec.encode_collection([flower, make_flower("B", day=2)]).decode()
        original = str(flower.id)
        replacement = ("0" if original[0] != "0" else "1") + original[1:]
        with pytest.raises(IntegrityMismatch, match="Checksum"):
            codec.decode_collection(data.replace(original, replacement))

    def test_garbled_id_fails_integrity(self, make_flower: Callable[..., Flower]) -> None:
        flower = make_flower()
        data = codec.encode_collection([flower]).decode()
        with pytest.raises(IntegrityMismatch):
            codec.decode_collection(data.replace(str(flower.id), "zz" + str(flower.id)[2:]))

    def test_dropped_flower_fails_integrity(self, make_flower: Callable[..., Flower]) -> None:
        a, b = make_flower("A", day=1), make_flower("B", day=2)
        raw = json.loads(codec.encode_collection([a, b]))
        raw["flowers"] = raw["flowers"][:1]
        with pytest.raises(IntegrityMismatch):
            codec.decode_collection(json.dumps(raw))

    def test_count_mismatch(self, make_flower: Callable[..., Flower]) -> None:
        raw = json.loads(codec.encode_collection([make_flower()]))
        raw["metadata"]["total_flowers"] = 3
        with pytest.raises(IntegrityMismatch, match="count"):
            codec.decode_collection(json.dumps(raw))

    def test_newer_version_rejected_first(self, make_flower: Callable[..., Flower]) -> None:
        raw = json.loads(codec.encode_collection([make_flower()]))
        raw["version"] = 2
        raw["metadata"]["checksum"] = "wrong"
        with pytest.raises(VersionUnsupported) as exc_info:
            codec.decode_collection(json.dumps(raw))
        assert exc_info.value.version == 2

    @pytest.mark.parametrize("data", [b"", b"not json", b"[1, 2]", b'{"version": "one"}'])
    def test_malformed(self, data: bytes) -> None:
        with pytest.raises(MalformedTransferDocument):
            codec.decode_collection(data)

    def test_schema_violation_is_malformed(self, make_flower: Callable[..., Flower]) -> None:
        raw = json.loads(codec.encode_collection([make_flower()]))
        del raw["flowers"][0]["name"]
        with pytest.raises(MalformedTransferDocument):
            codec.decode_collection(json.dumps(raw))

    def test_record_without_id_is_malformed(self, make_flower: Callable[..., Flower]) -> None:
        flowers = [make_flower("A", day=1), make_flower("B", day=2)]
        raw = json.loads(codec.encode_collection(flowers))
        del raw["flowers"][1]["id"]
        with pytest.raises(MalformedTransferDocument, match="needs an id"):
            codec.decode_collection(json.dumps(raw))


class TestBackupFiles:
    """File naming, reading and rotation."""

    def test_write_and_read(self, make_flower: Callable[..., Flower], tmp_path: Path) -> None:
        flowers = [make_flower()]
        path = codec.write_collection_file(
            tmp_path, flowers, now=datetime(2025, 7, 1, 9, 5), device_name="Pixel"
        )
        assert path.name == "FlowerCollection_2025-07-01_09-05.bouquet"
        assert codec.read_collection_file(path).flowers == flowers

    def test_read_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MalformedTransferDocument):
            codec.read_collection_file(tmp_path / "missing.bouquet")

    def test_cleanup_keeps_newest(self, tmp_path: Path) -> None:
        for i in range(7):
            path = tmp_path / f"FlowerCollection_2025-07-0{i + 1}_00-00.bouquet"
            path.write_text("{}")
            os.utime(path, (1_000_000 + i, 1_000_000 + i))
        (tmp_path / "notes.txt").write_text("keep me")

        removed = codec.cleanup_old_backups(tmp_path, keep=5)

        assert sorted(p.name for p in removed) == [
            "FlowerCollection_2025-07-01_00-00.bouquet",
            "FlowerCollection_2025-07-02_00-00.bouquet",
        ]
        assert len(list(tmp_path.glob("*.bouquet"))) == 5
        assert (tmp_path / "notes.txt").exists()

    def test_cleanup_missing_directory(self, tmp_path: Path) -> None:
        assert codec.cleanup_old_backups(tmp_path / "nope") == []


class TestFlowerGift:
    """Single-flower export / import with one-time tokens."""

    def test_export_does_not_touch_input(self, make_flower: Callable[..., Flower]) -> None:
        flower = make_flower()
        exported = codec.export_flower(flower, FlowerOwner(name="Ada"))
        assert flower.transfer_token is None
        assert flower.original_owner is None
        assert exported.flower.original_owner is not None
        assert exported.flower.transfer_token is not None

    def test_import_consumes_token(self, rich_flower: Flower) -> None:
        flower = rich_flower
        exported = codec.export_flower(flower, FlowerOwner(name="Linus"))

        received = codec.import_flower(exported.data)

        assert received.flower.id == flower.id
        assert received.flower.transfer_token is None
        assert received.sender.name == "Linus"
        assert [o.name for o in received.flower.owners] == ["Grace", "Linus"]
        assert received.flower.original_owner is not None
        assert received.flower.original_owner.name == "Ada"

    def test_consumed_document_cannot_be_imported(self, make_flower: Callable[..., Flower]) -> None:
        exported = codec.export_flower(make_flower(), FlowerOwner(name="Ada"))
        received = codec.import_flower(exported.data)
        with pytest.raises(DuplicateTransfer, match="already been received"):
            codec.import_flower(received.consumed_document)

    def test_missing_token_is_duplicate(self, make_flower: Callable[..., Flower]) -> None:
        exported = codec.export_flower(make_flower(), FlowerOwner(name="Ada"))
        raw = json.loads(exported.data)
        raw["flower"]["transfer_token"] = None
        with pytest.raises(DuplicateTransfer):
            codec.import_flower(json.dumps(raw))

    def test_newer_version_rejected(self, make_flower: Callable[..., Flower]) -> None:
        exported = codec.export_flower(make_flower(), FlowerOwner(name="Ada"))
        raw = json.loads(exported.data)
        raw["version"] = 5
        with pytest.raises(VersionUnsupported):
            codec.import_flower(json.dumps(raw))

    def test_malformed(self) -> None:
        with pytest.raises(MalformedTransferDocument):
            codec.import_flower(b'{"version": 1, "flower": {}}')

    def test_gift_without_id_is_malformed(self, make_flower: Callable[..., Flower]) -> None:
        exported = codec.export_flower(make_flower(), FlowerOwner(name="Ada"))
        raw = json.loads(exported.data)
        del raw["flower"]["id"]
        with pytest.raises(MalformedTransferDocument):
            codec.import_flower(json.dumps(raw))


class TestGiftFiles:
    """.flower files can be received exactly once."""

    def test_file_received_once(self, make_flower: Callable[..., Flower], tmp_path: Path) -> None:
        path, sent = codec.write_flower_file(
            tmp_path, make_flower("Damask Rose / Gift"), FlowerOwner(name="Ada")
        )
        assert path.name == "Damask_Rose_Gift.flower"
        assert sent.transfer_token is not None

        received = codec.read_flower_file(path)
        assert received.flower.transfer_token is None

        with pytest.raises(DuplicateTransfer):
            codec.read_flower_file(path)

    def test_reexport_allows_second_receipt(
        self,
        make_flower: Callable[..., Flower],
        tmp_path: Path,
    ) -> None:
        path, _ = codec.write_flower_file(tmp_path, make_flower(), FlowerOwner(name="Ada"))
        received = codec.read_flower_file(path)

        path, _ = codec.write_flower_file(tmp_path, received.flower, FlowerOwner(name="Grace"))
        again = codec.read_flower_file(path)
        assert [o.name for o in again.flower.owners] == ["Grace"]

    def test_sanitize_filename(self) -> None:
        assert codec.sanitize_filename("Queen of the Andes") == "Queen_of_the_Andes"
        assert codec.sanitize_filename("???") == "flower"

    def test_any_file_name_can_be_received(
        self,
        make_flower: Callable[..., Flower],
        tmp_path: Path,
    ) -> None:
        exported = codec.export_flower(make_flower(), FlowerOwner(name="Ada"))
        path = tmp_path / "Damask Rose (1).flower"
        path.write_bytes(exported.data)

        received = codec.read_flower_file(path)
        assert received.flower.id == exported.flower.id

        with pytest.raises(DuplicateTransfer):
            codec.read_flower_file(path)
        assert [p.name for p in tmp_path.iterdir()] == ["Damask Rose (1).flower"]

    def test_failed_accept_keeps_file_receivable(
        self,
        make_flower: Callable[..., Flower],
        tmp_path: Path,
    ) -> None:
        path, _ = codec.write_flower_file(tmp_path, make_flower(), FlowerOwner(name="Ada"))
        original = path.read_bytes()

        def refuse(flower: Flower) -> None:
            raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            codec.read_flower_file(path, accept=refuse)
        assert path.read_bytes() == original

        accepted: list[Flower] = []
        received = codec.read_flower_file(path, accept=accepted.append)
        assert accepted == [received.flower]
        with pytest.raises(DuplicateTransfer):
            codec.read_flower_file(path)
