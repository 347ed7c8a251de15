"""
Manage the local OSPA candidate registry from the command line.

Usage:
    python -m ospa.scripts.manage list                    # totals per candidate
    python -m ospa.scripts.manage export --out exports/   # write ospa_export_<date>.csv
    python -m ospa.scripts.manage sync                    # push all candidates to the spreadsheet
    python -m ospa.scripts.manage delete <candidate_id>
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from ospa.core.exceptions import EntityNotFoundException

logging.basicConfig(level=logging.INFO, format='%(asctime)s | %(levelname)-8s | %(message)s', datefmt='%H:%M:%S')
logger = logging.getLogger(__name__)


def cmd_list(service) -> int:
    candidates = service.list_candidates()
    if not candidates:
        logger.info("No candidates scored yet.")
        return 0
    print(f"{'ID':<36}  {'Name':<28}  {'Division':<22}  {'Total':>7}")
    print("-" * 99)
    for c in sorted(candidates, key=lambda c: c.total_score, reverse=True):
        print(f"{c.id:<36}  {c.name[:28]:<28}  {c.division[:22]:<22}  {c.total_score:>7.2f}")
    print(f"\n{len(candidates)} candidate(s); last sync: {service.last_sync() or 'never'}")
    return 0


def cmd_export(service, out_dir: str) -> int:
    path = service.export_csv(Path(out_dir) if out_dir else None)
    if path is None:
        logger.warning("Nothing exported: no candidates stored")
    else:
        print(path)
    return 0


def cmd_sync(service) -> int:
    if not service.gateway.enabled:
        logger.error("SYNC_URL is not configured; set it in the environment or .env")
        return 1
    result = asyncio.run(service.sync_all())
    if result.synced:
        logger.info(f"Synced {result.candidate_count} candidate(s) at {result.last_sync}")
        return 0
    logger.error("Sync failed; local records are unchanged")
    return 1


def cmd_delete(service, candidate_id: str) -> int:
    try:
        service.delete(candidate_id)
    except EntityNotFoundException as e:
        logger.error(str(e))
        return 1
    logger.info(f"Deleted candidate {candidate_id}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="OSPA candidate registry")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List candidates with their totals")
    p_export = sub.add_parser("export", help="Export candidates to CSV")
    p_export.add_argument("--out", default=None, help="Output directory (default: EXPORT_DIR)")
    sub.add_parser("sync", help="Push every candidate to the spreadsheet")
    p_delete = sub.add_parser("delete", help="Delete a candidate")
    p_delete.add_argument("candidate_id")
    args = parser.parse_args(argv)

    from ospa.core.dependencies import get_candidate_service
    service = get_candidate_service()

    if args.command == "list":
        return cmd_list(service)
    if args.command == "export":
        return cmd_export(service, args.out)
    if args.command == "sync":
        return cmd_sync(service)
    return cmd_delete(service, args.candidate_id)


if __name__ == "__main__":
    sys.exit(main())
