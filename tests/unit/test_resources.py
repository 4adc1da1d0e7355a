"""
Resource registry
"""

import pytest

from petclinic_e2e.resources import (
    RESOURCE_CONFIGS,
    get_cleanup_order,
    get_dependency_graph,
    get_resource_config,
    item_path,
)


def test_every_resource_has_a_collection_endpoint():
    for name, config in RESOURCE_CONFIGS.items():
        assert config.name == name
        assert config.endpoint == f"/{name}"


def test_item_path():
    assert item_path("owners", 42) == "/owners/42"
    assert get_resource_config("pettypes").item_endpoint(3) == "/pettypes/3"


def test_unknown_resource_is_rejected():
    with pytest.raises(ValueError, match="Unknown resource"):
        get_resource_config("clinics")


def test_cleanup_order_covers_every_resource_once():
    order = get_cleanup_order()
    assert sorted(order) == sorted(RESOURCE_CONFIGS)


def test_cleanup_order_deletes_children_before_parents():
    order = get_cleanup_order()
    for resource, parents in get_dependency_graph().items():
        for parent in parents:
            assert order.index(resource) < order.index(parent), f"{resource} must be deleted before {parent}"
