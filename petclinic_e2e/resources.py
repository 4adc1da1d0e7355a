"""
Resource configuration for pet-clinic CRUD testing
Centralized definition of all testable resources and their properties
"""

from typing import Dict, List
from dataclasses import dataclass, field


@dataclass
class ResourceConfig:
    """Configuration for a testable resource"""
    name: str
    endpoint: str
    id_param: str
    factory_method: str
    dependencies: List[str] = field(default_factory=list)

    def item_endpoint(self, resource_id) -> str:
        return f"{self.endpoint}/{resource_id}"


RESOURCE_CONFIGS = {
    "owners": ResourceConfig(
        name="owners",
        endpoint="/owners",
        id_param="ownerId",
        factory_method="generate_owner",
    ),

    "pets": ResourceConfig(
        name="pets",
        endpoint="/pets",
        id_param="petId",
        factory_method="generate_pet",
        dependencies=["owners", "pettypes"]
    ),

    "vets": ResourceConfig(
        name="vets",
        endpoint="/vets",
        id_param="vetId",
        factory_method="generate_vet",
        dependencies=["specialties"]
    ),

    "visits": ResourceConfig(
        name="visits",
        endpoint="/visits",
        id_param="visitId",
        factory_method="generate_visit",
        dependencies=["pets"]
    ),

    "pettypes": ResourceConfig(
        name="pettypes",
        endpoint="/pettypes",
        id_param="petTypeId",
        factory_method="generate_pet_type",
    ),

    "specialties": ResourceConfig(
        name="specialties",
        endpoint="/specialties",
        id_param="specialtyId",
        factory_method="generate_specialty",
    ),
}


def get_resource_config(resource_name: str) -> ResourceConfig:
    """Get configuration for a specific resource"""
    if resource_name not in RESOURCE_CONFIGS:
        raise ValueError(f"Unknown resource: {resource_name}")
    return RESOURCE_CONFIGS[resource_name]


def item_path(resource_name: str, resource_id) -> str:
    """Endpoint of a single record, e.g. /owners/42"""
    return get_resource_config(resource_name).item_endpoint(resource_id)


def get_cleanup_order() -> List[str]:
    """Get resources in proper cleanup order (children first)"""
    return [
        'visits',       # References pets
        'pets',         # References owners and pet types
        'vets',         # References specialties
        'owners',
        'specialties',
        'pettypes'
    ]


def get_dependency_graph() -> Dict[str, List[str]]:
    """Get dependency relationships for test ordering"""
    return {
        resource: config.dependencies
        for resource, config in RESOURCE_CONFIGS.items()
    }
