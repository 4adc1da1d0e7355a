"""
Lightweight test data factory
Generates realistic payloads that satisfy the backend's field validation
"""

import re
from datetime import date
from typing import Dict, Any, List, Optional
from faker import Faker

# Seed data shipped with the pet-clinic database
PET_TYPE_CAT = {"id": 1, "name": "cat"}
PET_TYPE_DOG = {"id": 2, "name": "dog"}
SPECIALTY_RADIOLOGY = {"id": 1, "name": "radiology"}
SPECIALTY_SURGERY = {"id": 2, "name": "surgery"}
SEEDED_OWNER_IDS = (1, 2)

_NON_LETTERS = re.compile(r"[^A-Za-z]")


class DataFactory:
    """Lightweight payload generator"""

    def __init__(self, seed: Optional[int] = None):
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def _letters_only(self, value: str, fallback: str) -> str:
        # Backend name validation rejects apostrophes, hyphens and spaces
        cleaned = _NON_LETTERS.sub("", value)
        return cleaned or fallback

    def _telephone(self) -> str:
        return self.fake.numerify("##########")

    @staticmethod
    def _iso_date(value: date) -> str:
        return value.isoformat()

    def generate_owner(self, **overrides) -> Dict[str, Any]:
        """Generate owner payload"""
        data = {
            "firstName": self._letters_only(self.fake.first_name(), "John"),
            "lastName": self._letters_only(self.fake.last_name(), "Doe"),
            "address": self.fake.street_address()[:255],
            "city": self._letters_only(self.fake.city(), "Springfield"),
            "telephone": self._telephone(),
        }
        data.update(overrides)
        return data

    def generate_pet(self, owner_id: int, pet_type: Optional[Dict[str, Any]] = None, **overrides) -> Dict[str, Any]:
        """Generate pet payload for an owner"""
        data = {
            "name": self._letters_only(self.fake.first_name(), "Buddy"),
            "birthDate": self._iso_date(self.fake.date_between(start_date="-10y", end_date="today")),
            "type": dict(pet_type or PET_TYPE_DOG),
            "ownerId": owner_id,
        }
        data.update(overrides)
        return data

    def generate_vet(self, specialties: Optional[List[Dict[str, Any]]] = None, **overrides) -> Dict[str, Any]:
        """Generate vet payload"""
        if specialties is None:
            specialties = [SPECIALTY_RADIOLOGY]
        data = {
            "firstName": self._letters_only(self.fake.first_name(), "Jane"),
            "lastName": self._letters_only(self.fake.last_name(), "Smith"),
            "specialties": [dict(specialty) for specialty in specialties],
        }
        data.update(overrides)
        return data

    def generate_visit(self, pet_id: int, **overrides) -> Dict[str, Any]:
        """Generate visit payload for a pet"""
        data = {
            "date": self._iso_date(self.fake.date_between(start_date="-1y", end_date="today")),
            "description": self.fake.sentence(nb_words=3).rstrip("."),
            "petId": pet_id,
        }
        data.update(overrides)
        return data

    def generate_pet_type(self, **overrides) -> Dict[str, Any]:
        data = {"name": self.fake.unique.word().lower()}
        data.update(overrides)
        return data

    def generate_specialty(self, **overrides) -> Dict[str, Any]:
        data = {"name": self.fake.unique.word().lower()}
        data.update(overrides)
        return data

    @staticmethod
    def with_id(payload: Dict[str, Any], resource_id: int) -> Dict[str, Any]:
        """Copy of payload carrying the record id, as PUT bodies require"""
        data = dict(payload)
        data["id"] = resource_id
        return data
