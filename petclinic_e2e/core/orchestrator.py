"""
Lightweight API Test Orchestrator
Central coordination for pet-clinic CRUD testing: requests, timing, tracking
"""

import time
import logging
from typing import Dict, Any, List, Optional, Tuple
from dataclasses import dataclass, field

from petclinic_e2e.config import TestConfig, get_config
from petclinic_e2e.core.rest_client import RestClient, json_path
from petclinic_e2e.core.data_factory import DataFactory
from petclinic_e2e.core.tracker import ResourceTracker, CleanupReport
from petclinic_e2e.resources import get_resource_config

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class TestResult:
    """Simple test result container"""
    __test__ = False

    operation: str
    resource: str
    success: bool
    status_code: Optional[int]
    duration: float
    errors: List[str] = field(default_factory=list)
    body: Dict[str, Any] = field(default_factory=dict)
    id: Optional[int] = None


class APITestOrchestrator:
    """Lightweight API testing coordinator"""

    def __init__(self, config: Optional[TestConfig] = None, rest_client: Optional[RestClient] = None):
        self.config = config or get_config()
        self._owns_client = rest_client is None
        self.rest_client = rest_client or RestClient(self.config)
        self.data_factory = DataFactory()
        self.tracker = ResourceTracker()
        self.results: List[TestResult] = []

    async def setup(self):
        """Initialize components"""
        logger.debug("Orchestrator ready against %s", self.config.api_base_url)

    async def teardown(self) -> CleanupReport:
        """Delete tracked records and release the client"""
        report = await self.tracker.cleanup(self.rest_client)
        if report.failed:
            logger.warning("Cleanup left %d records behind: %s", len(report.failed), report.failed)
        if self._owns_client:
            await self.rest_client.aclose()
        return report

    async def time_operation(self, operation_name: str, coro) -> Tuple[Any, float]:
        """Time an operation and return result + duration"""
        start_time = time.perf_counter()
        result = await coro
        duration = time.perf_counter() - start_time
        logger.debug("%s took %.3fs", operation_name, duration)
        return result, duration

    @staticmethod
    def _extract_id(response: Dict[str, Any]) -> Optional[int]:
        value = response.get("id")
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    def _record(self, operation: str, resource: str, response: Dict[str, Any], duration: float,
                resource_id: Optional[int] = None) -> TestResult:
        success = response.get("_success", False)
        errors = []

        if not success:
            status_code = response.get('_status_code', 'Unknown')
            error_detail = response.get('detail', response.get('message', response.get('raw_response', 'No error message')))
            errors.append(f"HTTP {status_code}: {error_detail}")

        body = {k: v for k, v in response.items() if not k.startswith("_")}
        result = TestResult(operation, resource, success, response.get("_status_code"), duration, errors, body, resource_id)
        self.results.append(result)
        return result

    async def execute_create(self, resource: str, data: Dict[str, Any], track: bool = True) -> TestResult:
        """Execute CREATE operation"""
        config = get_resource_config(resource)
        response, duration = await self.time_operation(
            f"CREATE {resource}",
            self.rest_client.request("POST", config.endpoint, data)
        )

        resource_id = self._extract_id(response) if response.get("_success", False) else None
        result = self._record("CREATE", resource, response, duration, resource_id)

        if result.success and resource_id is None:
            result.errors.append("Could not extract id from response")
        if track and resource_id is not None:
            self.tracker.track(resource, resource_id)
        return result

    async def execute_read(self, resource: str, resource_id: int) -> TestResult:
        """Execute READ operation"""
        config = get_resource_config(resource)
        response, duration = await self.time_operation(
            f"READ {resource}",
            self.rest_client.request("GET", config.item_endpoint(resource_id))
        )
        return self._record("READ", resource, response, duration, resource_id)

    async def execute_list(self, resource: str, params: Optional[Dict] = None) -> TestResult:
        """Execute LIST operation"""
        config = get_resource_config(resource)
        response, duration = await self.time_operation(
            f"LIST {resource}",
            self.rest_client.request("GET", config.endpoint, params=params)
        )
        return self._record("LIST", resource, response, duration)

    async def execute_update(self, resource: str, resource_id: int, data: Dict[str, Any],
                             endpoint: Optional[str] = None) -> TestResult:
        """Execute UPDATE operation"""
        config = get_resource_config(resource)
        response, duration = await self.time_operation(
            f"UPDATE {resource}",
            self.rest_client.request("PUT", endpoint or config.item_endpoint(resource_id), data)
        )
        return self._record("UPDATE", resource, response, duration, resource_id)

    async def execute_delete(self, resource: str, resource_id: int) -> TestResult:
        """Execute DELETE operation"""
        config = get_resource_config(resource)
        response, duration = await self.time_operation(
            f"DELETE {resource}",
            self.rest_client.request("DELETE", config.item_endpoint(resource_id))
        )
        result = self._record("DELETE", resource, response, duration, resource_id)
        if result.status_code == 204:
            self.tracker.untrack(resource, resource_id)
        return result

    @staticmethod
    def expect_status(result: TestResult, *statuses: int) -> TestResult:
        """Assert the result carries one of the expected HTTP statuses"""
        if result.status_code not in statuses:
            expected = " or ".join(str(status) for status in statuses)
            raise AssertionError(
                f"{result.operation} {result.resource} (id={result.id}): expected HTTP {expected}, "
                f"got {result.status_code}; body={result.body}"
            )
        return result

    @staticmethod
    def assert_fields(body: Dict[str, Any], expected: Dict[str, Any]) -> None:
        """Assert dotted-path fields of a response body"""
        mismatches = []
        for path, expected_value in expected.items():
            try:
                actual_value = json_path(body, path)
            except KeyError:
                actual_value = _MISSING
            if actual_value is _MISSING:
                mismatches.append(f"{path}: missing")
            elif actual_value != expected_value:
                mismatches.append(f"{path} = {actual_value!r}, expected {expected_value!r}")

        if mismatches:
            raise AssertionError("Field validation failed: " + "; ".join(mismatches))

    def get_performance_summary(self) -> Dict[str, Any]:
        """Get performance summary"""
        if not self.results:
            return {"message": "No results available"}

        by_operation: Dict[str, List[TestResult]] = {}
        for result in self.results:
            by_operation.setdefault(result.operation, []).append(result)

        summary = {}
        for operation, results in by_operation.items():
            durations = [r.duration for r in results]
            summary[operation] = {
                "count": len(results),
                "avg_duration": sum(durations) / len(durations),
                "max_duration": max(durations),
                "success_rate": len([r for r in results if r.success]) / len(results)
            }

        return summary

    def get_success_summary(self) -> Dict[str, Any]:
        """Get success/failure summary"""
        total = len(self.results)
        successful = len([r for r in self.results if r.success])

        return {
            "total_operations": total,
            "successful": successful,
            "failed": total - successful,
            "success_rate": successful / total if total > 0 else 0
        }
