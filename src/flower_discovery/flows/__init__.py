"""
Prefect flows for scheduled collection maintenance.

Flows:
- auto-backup:       write a .bouquet backup when the last one is stale
- restore-backup:    merge a .bouquet file into the local collection
- sync-cloud-folder: two-way newest-wins sync with a shared folder

Usage (local):
    python -m flower_discovery.flows.backup

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'auto-backup/default'
"""
