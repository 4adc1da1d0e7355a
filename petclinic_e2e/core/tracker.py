"""
Track all records created during testing for complete cleanup
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from petclinic_e2e.resources import get_cleanup_order, item_path, RESOURCE_CONFIGS

logger = logging.getLogger(__name__)


@dataclass
class CleanupReport:
    """Outcome of a cleanup pass"""
    deleted: List[Tuple[str, int]] = field(default_factory=list)
    already_gone: List[Tuple[str, int]] = field(default_factory=list)
    failed: List[Tuple[str, int, str]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed


class ResourceTracker:
    """Track record ids by resource type for proper cleanup order"""

    def __init__(self):
        # Insertion order is kept so cleanup deletes in creation order per resource
        self.tracked_ids: Dict[str, Dict[int, None]] = {name: {} for name in RESOURCE_CONFIGS}

    def track(self, resource: str, resource_id: int) -> None:
        """Track an id for cleanup"""
        if resource not in self.tracked_ids:
            raise ValueError(f"Unknown resource: {resource}")
        self.tracked_ids[resource][int(resource_id)] = None

    def untrack(self, resource: str, resource_id: int) -> None:
        """Forget an id the test already deleted"""
        self.tracked_ids.get(resource, {}).pop(int(resource_id), None)

    def get_tracked(self, resource: str) -> List[int]:
        return list(self.tracked_ids.get(resource, {}))

    def total_tracked(self) -> int:
        return sum(len(ids) for ids in self.tracked_ids.values())

    async def cleanup(self, client) -> CleanupReport:
        """Delete everything tracked, children first; 404 counts as already removed"""
        report = CleanupReport()

        for resource in get_cleanup_order():
            for resource_id in self.get_tracked(resource):
                try:
                    response = await client.request("DELETE", item_path(resource, resource_id))
                except RuntimeError as e:
                    logger.error("Cleanup of %s %s failed: %s", resource, resource_id, e)
                    report.failed.append((resource, resource_id, str(e)))
                    continue

                status = response.get("_status_code")
                if status == 204:
                    report.deleted.append((resource, resource_id))
                elif status == 404:
                    report.already_gone.append((resource, resource_id))
                else:
                    logger.warning("Cleanup of %s %s returned HTTP %s", resource, resource_id, status)
                    report.failed.append((resource, resource_id, f"HTTP {status}"))
                    continue
                self.untrack(resource, resource_id)

        return report
