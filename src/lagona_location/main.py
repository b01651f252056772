"""
Main entry point for the LAGONA location utilities.

Provides the hub location audit and small command-line helpers.
"""

import math
import sys
from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional

from .core import Config, DateUtils, HubLoggerAdapter, LoggerContext, resolve_log_file, setup_logger
from .api import LagonaStoreAPI
from .algorithms import GeoDistanceCalculator, PlusCodeValidator
from .models import BusinessHub, LocationRecord
from .processing import LocationConsolidator, accuracy_tier, has_valid_plus_code

# Distances are compared at meter precision when deciding whether to write back
DISTANCE_TOLERANCE_KM = 0.001


class HubLocationAuditApp:
    """Audit stored hub locations and refresh their territory fields."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=resolve_log_file(self.config.log_file),
            log_level=self.config.log_level
        )
        self.logger.info("=" * 60)
        self.logger.info("LAGONA Hub Location Audit")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.api_client: Optional[LagonaStoreAPI] = None
        self.consolidator = LocationConsolidator(
            default_radius_km=self.config.default_radius_km,
            default_accuracy_meters=self.config.default_accuracy_meters,
            logger=self.logger
        )

    def initialize_components(self) -> None:
        """Create the data store client."""
        self.api_client = LagonaStoreAPI(
            base_url=self.config.store_url,
            api_key=self.config.store_api_key,
            timeout=self.config.store_timeout,
            max_retries=self.config.store_max_retries,
            schema=self.config.store_schema,
            logger=self.logger
        )

    def run(self, write: bool = False, status: Optional[str] = None) -> Dict[str, Any]:
        """
        Audit all business hub locations.

        Args:
            write: Write refreshed territory fields back to the store
            status: Only audit hubs with this status

        Returns:
            Summary counters
        """
        try:
            self.initialize_components()

            with LoggerContext(self.logger, "business hub fetch") as fetch:
                hubs = self.api_client.list_business_hubs(status=status)
                fetch.count = len(hubs)

            self.logger.info(f"Auditing {len(hubs)} business hubs")
            summary = self.audit_hubs(hubs, write=write)
            self.log_summary(summary)
            return summary

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise

        finally:
            if self.api_client:
                self.api_client.close()

    def audit_hubs(self, hubs: List[BusinessHub], write: bool = False) -> Dict[str, Any]:
        """
        Audit a list of hubs; per-hub failures are logged and counted.

        Args:
            hubs: Hubs to audit
            write: Write refreshed records back to the store

        Returns:
            Summary counters
        """
        summary: Dict[str, Any] = {
            "total": len(hubs),
            "missing_location": 0,
            "invalid_records": 0,
            "without_bounds": 0,
            "within_bounds": 0,
            "outside_bounds": 0,
            "updated": 0,
            "failed": 0,
            "with_plus_code": 0,
            "validation_status": Counter(),
            "accuracy": Counter(),
            "audited_at": DateUtils.utc_now(),
        }

        for hub in hubs:
            try:
                self.audit_hub(hub, summary, write=write)
            except Exception as e:
                summary["failed"] += 1
                self.logger.error(f"Failed to audit hub {hub.name} ({hub.id}): {e}", exc_info=True)

        return summary

    def audit_hub(self, hub: BusinessHub, summary: Dict[str, Any], write: bool = False) -> None:
        """Audit a single hub and update the summary in place."""
        log = HubLoggerAdapter(self.logger, hub.id, hub.name)
        record = hub.location
        if record is None:
            summary["missing_location"] += 1
            log.warning("No location data")
            return

        summary["validation_status"][record.validation_status.value] += 1
        summary["accuracy"][
            accuracy_tier(record.accuracy_meters, high_threshold_m=self.config.high_accuracy_threshold_m)
        ] += 1
        if has_valid_plus_code(record):
            summary["with_plus_code"] += 1

        is_valid, errors = record.validate(max_radius_km=self.config.max_radius_km)
        if not is_valid:
            summary["invalid_records"] += 1
            log.warning(
                f"Location issues: {errors} (selected {self.format_local_time(record.territory.selected_at)})"
            )

        bounds = hub.territory_boundaries
        if bounds is None:
            summary["without_bounds"] += 1
            log.debug("No territory boundaries")
            return

        refreshed = self.consolidator.recompute_territory(
            record, bounds.center_lat, bounds.center_lng
        )
        if refreshed.territory.is_within_bounds:
            summary["within_bounds"] += 1
        else:
            summary["outside_bounds"] += 1

        if write and self._territory_changed(record, refreshed):
            self.api_client.update_hub_location(hub.id, refreshed)
            summary["updated"] += 1

    @staticmethod
    def _territory_changed(old: LocationRecord, new: LocationRecord) -> bool:
        if old.territory.is_within_bounds != new.territory.is_within_bounds:
            return True

        old_distance = old.territory.distance_from_center
        new_distance = new.territory.distance_from_center
        if old_distance is None or new_distance is None:
            return old_distance is not new_distance

        # Unparseable coordinates give NaN, which abs() comparisons never flag
        old_nan, new_nan = math.isnan(old_distance), math.isnan(new_distance)
        if old_nan or new_nan:
            return old_nan != new_nan
        return abs(old_distance - new_distance) > DISTANCE_TOLERANCE_KM

    def format_local_time(self, dt: Optional[datetime]) -> str:
        """Render a timestamp in the configured display timezone."""
        if dt is None:
            return "unknown"
        return DateUtils.to_timezone(dt, self.config.timezone).strftime("%Y-%m-%d %H:%M %Z")

    def log_summary(self, summary: Dict[str, Any]) -> None:
        """Log the audit summary."""
        self.logger.info("=" * 60)
        self.logger.info("AUDIT SUMMARY")
        self.logger.info("=" * 60)
        self.logger.info(f"Audited at: {self.format_local_time(summary['audited_at'])}")
        self.logger.info(f"Hubs audited: {summary['total']}")
        self.logger.info(f"Missing location: {summary['missing_location']}")
        self.logger.info(f"Records with issues: {summary['invalid_records']}")
        self.logger.info(f"Without territory bounds: {summary['without_bounds']}")
        self.logger.info(
            f"Within bounds: {summary['within_bounds']}, outside: {summary['outside_bounds']}"
        )
        self.logger.info(f"With valid Plus Code: {summary['with_plus_code']}")
        self.logger.info(f"Validation status: {dict(summary['validation_status'])}")
        self.logger.info(f"Accuracy tiers: {dict(summary['accuracy'])}")
        if summary["updated"]:
            self.logger.info(f"Records updated: {summary['updated']}")
        if summary["failed"]:
            self.logger.warning(f"Hubs failed: {summary['failed']}")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="LAGONA hub location utilities"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    audit_parser = subparsers.add_parser("audit", help="Audit stored hub locations")
    audit_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    audit_parser.add_argument(
        "--status",
        type=str,
        default=None,
        help="Only audit hubs with this status"
    )
    audit_parser.add_argument(
        "--write",
        action="store_true",
        help="Write refreshed territory fields back to the store"
    )

    distance_parser = subparsers.add_parser("distance", help="Great-circle distance in km")
    for name in ("lat1", "lng1", "lat2", "lng2"):
        distance_parser.add_argument(name, type=float)

    plus_code_parser = subparsers.add_parser("plus-code", help="Validate a Plus Code")
    plus_code_parser.add_argument("code", type=str)

    args = parser.parse_args(argv)

    if args.command == "distance":
        distance = GeoDistanceCalculator.distance_km(args.lat1, args.lng1, args.lat2, args.lng2)
        print(f"{distance:.3f} km")
        return

    if args.command == "plus-code":
        if PlusCodeValidator.is_valid_plus_code(args.code):
            print(f"{args.code}: valid")
            return
        print(f"{args.code}: invalid")
        sys.exit(1)

    try:
        app = HubLocationAuditApp(config_file=args.config)
        app.run(write=args.write, status=args.status)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
