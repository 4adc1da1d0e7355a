"""
Harness core: REST client, payload factory, record tracking and orchestration
"""

from petclinic_e2e.core.rest_client import RestClient, ApiUnavailableError, json_path, status_of
from petclinic_e2e.core.data_factory import DataFactory
from petclinic_e2e.core.tracker import ResourceTracker, CleanupReport
from petclinic_e2e.core.orchestrator import APITestOrchestrator, TestResult
from petclinic_e2e.core.sweeper import FixtureSweeper, SweepReport

__all__ = [
    "RestClient",
    "ApiUnavailableError",
    "json_path",
    "status_of",
    "DataFactory",
    "ResourceTracker",
    "CleanupReport",
    "APITestOrchestrator",
    "TestResult",
    "FixtureSweeper",
    "SweepReport",
]
