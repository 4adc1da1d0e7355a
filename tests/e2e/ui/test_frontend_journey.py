"""
Frontend journey through the Angular UI

Steps run in file order and build on each other: the owner added first is
edited and given pets later, the vet added in step 8 is edited in step 9.
"""

import pytest
from playwright.async_api import expect

from petclinic_e2e.ui import NavigationBar, OwnerList, OwnerDetails

pytestmark = pytest.mark.asyncio(loop_scope="session")


async def open_owner(navbar: NavigationBar, full_name: str) -> OwnerDetails:
    owners = await navbar.search_owners()
    return await owners.open_owner(full_name)


async def test_01_add_owner(navbar: NavigationBar):
    form = await navbar.add_owner()
    await form.fill(firstName="Jane", lastName="Doe", address="456 Elm Street",
                    city="Metropolis", telephone="9876543210")
    await form.submit()

    await OwnerList(navbar.page).wait_for_owner("Jane Doe")
    await expect(navbar.body).to_contain_text("Jane Doe")


async def test_02_view_owner_details(navbar: NavigationBar):
    form = await navbar.add_owner()
    await form.fill(firstName="Joane", lastName="Doe", address="789 Elm Street",
                    city="Petropolis", telephone="1276543210")
    await form.submit()
    await OwnerList(navbar.page).wait_for_owner("Joane Doe")

    details = await open_owner(navbar, "Joane Doe")

    await expect(details.details_table).to_contain_text("Joane Doe")
    await expect(details.details_table).to_contain_text("789 Elm Street")


async def test_03_update_owner(navbar: NavigationBar):
    details = await open_owner(navbar, "Jane Doe")

    form = await details.edit()
    await form.fill(telephone="1112223333")
    await form.submit()

    updated = OwnerDetails(navbar.page)
    await expect(updated.details_table).to_contain_text("1112223333")


async def test_04_add_pet(navbar: NavigationBar):
    details = await open_owner(navbar, "Jane Doe")

    form = await details.add_pet()
    await form.fill(name="Buddy", birth_date="2023-01-01", pet_type="Dog")
    details = await form.save()

    await expect(details.pet_entry("Buddy")).to_be_visible()


async def test_05_view_pet_details(navbar: NavigationBar):
    details = await open_owner(navbar, "Jane Doe")
    await details.wait_for_pets()

    await expect(details.pet_entry("Buddy")).to_contain_text("Buddy")
    await expect(details.pet_entry("Buddy")).to_contain_text("dog")


async def test_06_update_pet_details(navbar: NavigationBar):
    details = await open_owner(navbar, "Jane Doe")
    await details.wait_for_pets()
    await expect(details.pet_entry("Buddy")).to_contain_text("dog")

    form = await details.edit_pet("Buddy")
    await form.fill(name="Buddy v2", birth_date="2024-01-01", pet_type="cat")
    details = await form.update()
    await expect(details.pet_entry("Buddy v2")).to_be_visible()

    await details.delete_pet("Buddy v2")
    await expect(details.pet_entries.filter(has_text="Buddy v2")).to_have_count(0)


async def test_07_delete_pet(navbar: NavigationBar):
    details = await open_owner(navbar, "Jane Doe")

    form = await details.add_pet()
    await form.fill(name="Buddy Junior", birth_date="2023-01-01", pet_type="Dog")
    details = await form.save()
    await expect(details.pet_entry("Buddy Junior")).to_be_visible()

    await details.delete_pet("Buddy Junior")
    await expect(details.pet_entries.filter(has_text="Buddy Junior")).to_have_count(0)


async def test_08_add_vet(navbar: NavigationBar):
    form = await navbar.add_vet()
    await form.fill(first_name="John", last_name="Smith", specialty="Radiology")
    vets = await form.submit()

    await expect(vets.table).to_contain_text("John Smith")


async def test_09_edit_vet_details(navbar: NavigationBar):
    vets = await navbar.all_vets()

    form = await vets.edit_vet("John Smith")
    await form.toggle_specialties("surgery", "radiology")
    vets = await form.save()

    await expect(vets.table).to_contain_text("surgery")


async def test_10_delete_vet(navbar: NavigationBar):
    form = await navbar.add_vet()
    await form.fill(first_name="Max", last_name="Muster", specialty="Radiology")
    vets = await form.submit()
    await expect(vets.table).to_contain_text("Max Muster")

    await vets.delete_vet("Max Muster")
    await expect(vets.table).not_to_contain_text("Max Muster")
