"""
Pytest fixtures for the REST API suites
One shared client per session, one orchestrator (and cleanup pass) per module
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio

from petclinic_e2e.core import RestClient, APITestOrchestrator


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def shared_rest_client(config) -> AsyncGenerator[RestClient, None]:
    """Shared REST client; skips the API suites when the backend is down"""
    client = RestClient(config)

    print(f"\n📡 Verifying API connectivity at {config.api_base_url}...")
    if not await client.health_check():
        await client.aclose()
        pytest.skip(f"pet-clinic backend not reachable at {config.api_base_url}")
    print("✅ Backend server connectivity verified")

    yield client
    await client.aclose()


@pytest_asyncio.fixture(scope="module", loop_scope="session")
async def orchestrator(config, shared_rest_client) -> AsyncGenerator[APITestOrchestrator, None]:
    """Module-scoped orchestrator; records it tracked are deleted when the module ends"""
    orch = APITestOrchestrator(config, shared_rest_client)
    await orch.setup()

    yield orch

    tracked = orch.tracker.total_tracked()
    report = await orch.teardown()
    print(f"\n🧹 Cleanup: {len(report.deleted)} deleted, {len(report.already_gone)} already gone "
          f"of {tracked} tracked")
    if report.failed:
        print(f"⚠️  Cleanup left records behind: {report.failed}")
