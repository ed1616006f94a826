"""
Prefect flows for backups, restores and shared-folder sync.

Run locally:
    python -m flower_discovery.flows.backup

Run with Prefect dashboard:
    prefect server start &
    python -m flower_discovery.flows.backup

Directories default to the ``FLOWERS_*`` settings (see ``config.py``).
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task
from pydantic import TypeAdapter

from flower_discovery import codec
from flower_discovery.collection import CollectionStore
from flower_discovery.config import get_settings
from flower_discovery.schemas import Flower
from flower_discovery.store import FileStore

# Keys within the data directory / cloud folder
BACKUP_STATE_KEY = "backup_state.json"
CLOUD_FLOWERS_KEY = "flowers_collection.json"
CLOUD_METADATA_KEY = "sync_metadata.json"

_FLOWER_LIST = TypeAdapter(list[Flower])


def _collection(data_dir: Path | None) -> CollectionStore:
    return CollectionStore(FileStore(data_dir or get_settings().data_dir))


@task(name="write-backup")
def write_backup(flowers: list[Flower], backup_dir: Path) -> Path:
    """Encode the collection into a new ``.bouquet`` file."""
    settings = get_settings()
    return codec.write_collection_file(
        backup_dir,
        flowers,
        now=datetime.now(UTC),
        device_id=settings.device_id,
        device_name=settings.device_name,
        app_version=settings.app_version,
        exporter_name=settings.owner_name,
    )


@task(name="prune-backups")
def prune_backups(backup_dir: Path, keep: int) -> list[Path]:
    """Keep only the ``keep`` newest backup files."""
    return codec.cleanup_old_backups(backup_dir, keep=keep)


@task(name="read-backup")
def read_backup(path: Path) -> list[Flower]:
    """Decode and verify a ``.bouquet`` file."""
    return codec.read_collection_file(path).flowers


@task(name="read-cloud-copy")
def read_cloud_copy(cloud: FileStore) -> list[Flower]:
    raw = cloud.get(CLOUD_FLOWERS_KEY)
    if raw is None:
        return []
    return _FLOWER_LIST.validate_json(raw)


@task(name="write-cloud-copy")
def write_cloud_copy(cloud: FileStore, flowers: list[Flower]) -> Path:
    """Write the merged collection and sync metadata to the shared folder."""
    settings = get_settings()
    cloud.set(CLOUD_FLOWERS_KEY, _FLOWER_LIST.dump_json(flowers, indent=2))
    return cloud.write_json(
        CLOUD_METADATA_KEY,
        {
            "last_sync_date": datetime.now(UTC).isoformat(),
            "flower_count": len(flowers),
            "device_name": settings.device_name,
        },
        source="sync-cloud-folder",
        device_id=settings.device_id,
    )


@flow(name="auto-backup", log_prints=True)
def auto_backup(
    data_dir: Path | None = None,
    backup_dir: Path | None = None,
    force: bool = False,
) -> dict[str, Any]:
    """
    Back up the collection unless the last backup is still fresh.

    A successful backup records ``valid_until = now + auto_backup_hours`` in
    ``backup_state.json``; until then the flow is a no-op unless ``force``.
    """
    settings = get_settings()
    data_dir = data_dir or settings.data_dir
    backup_dir = backup_dir or settings.backup_dir
    state = FileStore(data_dir)

    if not force and state.is_fresh(BACKUP_STATE_KEY):
        print("Last backup is fresh, skipping.")
        return {"skipped": True, "reason": "fresh"}

    flowers = _collection(data_dir).snapshot()
    if not flowers:
        print("Collection is empty, nothing to back up.")
        return {"skipped": True, "reason": "empty"}

    path = write_backup(flowers, backup_dir)
    removed = prune_backups(backup_dir, settings.backups_to_keep)
    state.write_json(
        BACKUP_STATE_KEY,
        {"last_backup": str(path), "flower_count": len(flowers)},
        source="auto-backup",
        valid_until=datetime.now(UTC) + timedelta(hours=settings.auto_backup_hours),
    )
    print(f"Backed up {len(flowers)} flowers to {path} (removed {len(removed)} old backups)")
    return {
        "skipped": False,
        "path": str(path),
        "flower_count": len(flowers),
        "removed": len(removed),
    }


@flow(name="restore-backup", log_prints=True)
def restore_backup(path: Path, data_dir: Path | None = None) -> dict[str, int]:
    """Merge a ``.bouquet`` file into the local collection (newest wins)."""
    incoming = read_backup(path)
    collection = _collection(data_dir)
    stats = collection.merge_in(incoming)
    print(
        f"Restored {path.name}: {stats.new_flowers} new, "
        f"{stats.updated_flowers} updated, {stats.kept_existing} kept"
    )
    return {**asdict(stats), "total": len(collection)}


@flow(name="sync-cloud-folder", log_prints=True)
def sync_cloud_folder(cloud_dir: Path | None = None, data_dir: Path | None = None) -> dict[str, int]:
    """
    Two-way sync with a shared folder.

    The folder's copy is merged into the local collection, then the merged
    result is written back so every device converges on the same set.
    """
    cloud_dir = cloud_dir or get_settings().cloud_dir
    if cloud_dir is None:
        msg = "No cloud folder configured (set FLOWERS_CLOUD_DIR)"
        raise ValueError(msg)

    cloud = FileStore(cloud_dir)
    collection = _collection(data_dir)

    remote = read_cloud_copy(cloud)
    stats = collection.merge_in(remote)
    merged = collection.snapshot()
    write_cloud_copy(cloud, merged)

    print(
        f"Synced with {cloud_dir}: {stats.new_flowers} new, "
        f"{stats.updated_flowers} updated, {len(merged)} total"
    )
    return {**asdict(stats), "total": len(merged)}


if __name__ == "__main__":
    result = auto_backup()
    print(f"Flow complete: {result}")
