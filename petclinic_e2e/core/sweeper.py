"""
Fixture sweeper
Removes records left behind by earlier UI journeys so fixed names stay unique
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from petclinic_e2e.core.rest_client import RestClient
from petclinic_e2e.resources import item_path

logger = logging.getLogger(__name__)

# Names the browser journey creates through the UI
UI_OWNER_NAMES: Tuple[Tuple[str, str], ...] = (("Jane", "Doe"), ("Joane", "Doe"))
UI_VET_NAMES: Tuple[Tuple[str, str], ...] = (("John", "Smith"), ("Max", "Muster"))


@dataclass
class SweepReport:
    """Records matched and removed by a sweep"""
    matched: List[Tuple[str, int]] = field(default_factory=list)
    deleted: List[Tuple[str, int]] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def _full_name(record: dict) -> Tuple[str, str]:
    return (record.get("firstName", ""), record.get("lastName", ""))


class FixtureSweeper:
    """Delete owners and vets whose names match the journey fixtures"""

    def __init__(self, client: RestClient, owner_names: Iterable[Tuple[str, str]] = UI_OWNER_NAMES,
                 vet_names: Iterable[Tuple[str, str]] = UI_VET_NAMES, dry_run: bool = False):
        self.client = client
        self.owner_names = set(owner_names)
        self.vet_names = set(vet_names)
        self.dry_run = dry_run

    async def _list(self, endpoint: str) -> List[dict]:
        response = await self.client.request("GET", endpoint)
        # Older backends answer 404 for an empty collection
        if response.get("_status_code") == 404:
            return []
        if not response.get("_success", False):
            raise RuntimeError(f"Listing {endpoint} failed with HTTP {response.get('_status_code')}")
        return response.get("data", [])

    async def _delete(self, resource: str, resource_id: int, report: SweepReport) -> bool:
        if self.dry_run:
            return True
        response = await self.client.request("DELETE", item_path(resource, resource_id))
        status = response.get("_status_code")
        if status in (204, 404):
            report.deleted.append((resource, resource_id))
            return True
        report.errors.append(f"DELETE {resource}/{resource_id} returned HTTP {status}")
        return False

    async def sweep(self) -> SweepReport:
        report = SweepReport()

        for owner in await self._list("/owners"):
            if _full_name(owner) not in self.owner_names:
                continue
            report.matched.append(("owners", owner["id"]))
            # Owners that still have pets cannot be deleted
            pets_removed = True
            for pet in owner.get("pets", []):
                report.matched.append(("pets", pet["id"]))
                pets_removed = await self._delete("pets", pet["id"], report) and pets_removed
            if pets_removed:
                await self._delete("owners", owner["id"], report)

        for vet in await self._list("/vets"):
            if _full_name(vet) in self.vet_names:
                report.matched.append(("vets", vet["id"]))
                await self._delete("vets", vet["id"], report)

        if self.dry_run:
            logger.info("Sweep (dry run) matched %d records", len(report.matched))
        else:
            logger.info("Sweep deleted %d of %d matched records", len(report.deleted), len(report.matched))
        for error in report.errors:
            logger.warning(error)
        return report
