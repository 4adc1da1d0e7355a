"""
Page objects for the pet-clinic Angular frontend

Each object wraps a Playwright Page, locates elements by the ids, link texts
and button labels the frontend renders, and waits explicitly for the screen
it expects before handing back the next page object.
"""

import re
from typing import Optional

from playwright.async_api import Page, Locator

DETAILS_TABLE = ".table-striped"
PET_LIST = "app-pet-list"


def exact_text(text: str) -> re.Pattern:
    """Case-insensitive whole-text match; the navbar renders labels upper-cased via CSS"""
    return re.compile(rf"^\s*{re.escape(text)}\s*$", re.IGNORECASE)


class BasePage:

    def __init__(self, page: Page):
        self.page = page

    def link(self, text: str) -> Locator:
        return self.page.get_by_role("link", name=exact_text(text)).first

    def button(self, text: str, scope: Optional[Locator] = None) -> Locator:
        return (scope or self.page).get_by_role("button", name=exact_text(text)).first

    @property
    def body(self) -> Locator:
        return self.page.locator("body")

    async def dismiss_overlays(self) -> None:
        # Closes open selects and date pickers, like clicking the page body
        await self.page.keyboard.press("Escape")


class NavigationBar(BasePage):
    """Top navigation: OWNERS and VETERINARIANS menus"""

    async def open_home(self) -> "NavigationBar":
        await self.page.goto("/")
        return self

    async def open_owners_menu(self) -> None:
        await self.link("Owners").click()

    async def open_vets_menu(self) -> None:
        await self.link("Veterinarians").click()

    async def add_owner(self) -> "OwnerForm":
        await self.open_owners_menu()
        await self.link("Add New").click()
        form = OwnerForm(self.page)
        await form.wait_loaded()
        return form

    async def search_owners(self) -> "OwnerList":
        await self.open_owners_menu()
        await self.link("Search").click()
        return OwnerList(self.page)

    async def add_vet(self) -> "VetForm":
        await self.open_vets_menu()
        await self.link("Add New").click()
        form = VetForm(self.page)
        await form.wait_loaded()
        return form

    async def all_vets(self) -> "VetList":
        await self.open_vets_menu()
        await self.link("All").click()
        vets = VetList(self.page)
        await vets.wait_loaded()
        return vets


class OwnerForm(BasePage):
    """Add/edit owner form"""

    FIELDS = ("firstName", "lastName", "address", "city", "telephone")

    async def wait_loaded(self) -> None:
        await self.page.locator("#firstName").wait_for(state="visible")

    async def fill(self, **values: str) -> "OwnerForm":
        """Fill inputs by id, e.g. fill(firstName="Jane", city="Metropolis")"""
        for field_id, value in values.items():
            if field_id not in self.FIELDS:
                raise ValueError(f"Unknown owner field: {field_id}")
            await self.page.locator(f"#{field_id}").fill(value)
        return self

    async def submit(self) -> None:
        await self.page.locator("button[type='submit']").first.click()


class OwnerList(BasePage):
    """Owner search results"""

    def owner_link(self, full_name: str) -> Locator:
        return self.link(full_name)

    async def wait_for_owner(self, full_name: str) -> Locator:
        link = self.owner_link(full_name)
        await link.wait_for(state="visible")
        return link

    async def open_owner(self, full_name: str) -> "OwnerDetails":
        link = await self.wait_for_owner(full_name)
        await link.click()
        details = OwnerDetails(self.page)
        await details.wait_loaded()
        return details


class OwnerDetails(BasePage):
    """Owner information table plus the owner's pets and visits"""

    @property
    def details_table(self) -> Locator:
        return self.page.locator(DETAILS_TABLE).first

    @property
    def pets(self) -> "PetList":
        return PetList(self.page)

    @property
    def pet_entries(self) -> Locator:
        return self.pets.entries

    def pet_entry(self, pet_name: str) -> Locator:
        return self.pets.entry(pet_name)

    async def wait_loaded(self) -> None:
        await self.details_table.wait_for(state="visible")
        await self.button("Edit Owner").wait_for(state="visible")

    async def edit(self) -> OwnerForm:
        await self.button("Edit Owner").click()
        form = OwnerForm(self.page)
        await form.wait_loaded()
        return form

    async def add_pet(self) -> "PetForm":
        await self.button("Add New Pet").click()
        form = PetForm(self.page)
        await form.wait_loaded()
        return form

    async def edit_pet(self, pet_name: Optional[str] = None) -> "PetForm":
        return await self.pets.edit(pet_name)

    async def delete_pet(self, pet_name: Optional[str] = None) -> None:
        await self.pets.delete(pet_name)

    async def wait_for_pets(self) -> "PetList":
        return await self.pets.wait_loaded()


class PetList(BasePage):
    """Pets on the owner details screen"""

    @property
    def entries(self) -> Locator:
        # One app-pet-list component is rendered per pet
        return self.page.locator(PET_LIST)

    def entry(self, pet_name: Optional[str] = None) -> Locator:
        if pet_name is None:
            return self.entries.first
        return self.entries.filter(has_text=pet_name).first

    async def wait_loaded(self) -> "PetList":
        await self.entries.first.wait_for(state="visible")
        return self

    async def edit(self, pet_name: Optional[str] = None) -> "PetForm":
        await self.button("Edit Pet", self.entry(pet_name)).click()
        form = PetForm(self.page)
        await form.wait_loaded()
        return form

    async def delete(self, pet_name: Optional[str] = None) -> None:
        await self.button("Delete Pet", self.entry(pet_name)).click()


class PetForm(BasePage):
    """Add/edit pet form"""

    async def wait_loaded(self) -> None:
        await self.page.locator("#name").wait_for(state="visible")

    async def fill(self, name: Optional[str] = None, birth_date: Optional[str] = None,
                   pet_type: Optional[str] = None) -> "PetForm":
        if name is not None:
            await self.page.locator("#name").fill(name)
        if birth_date is not None:
            await self.page.locator("input[name='birthDate']").fill(birth_date)
        if pet_type is not None:
            # Option labels are the lower-case pet type names
            await self.page.locator("#type").select_option(label=pet_type.lower())
        await self.dismiss_overlays()
        return self

    async def save(self) -> OwnerDetails:
        await self.button("Save Pet").click()
        return await self._back_to_owner()

    async def update(self) -> OwnerDetails:
        await self.button("Update Pet").click()
        return await self._back_to_owner()

    async def _back_to_owner(self) -> OwnerDetails:
        await PetList(self.page).wait_loaded()
        return OwnerDetails(self.page)


class VetForm(BasePage):
    """Add/edit veterinarian form"""

    async def wait_loaded(self) -> None:
        await self.page.locator("#firstName").wait_for(state="visible")

    async def fill(self, first_name: Optional[str] = None, last_name: Optional[str] = None,
                   specialty: Optional[str] = None) -> "VetForm":
        if first_name is not None:
            await self.page.locator("#firstName").fill(first_name)
        if last_name is not None:
            await self.page.locator("#lastName").fill(last_name)
        if specialty is not None:
            await self.page.locator("#specialties").select_option(label=specialty.lower())
        return self

    async def toggle_specialties(self, *names: str) -> "VetForm":
        """Tick or untick options of the multi-select on the edit form"""
        await self.page.locator("div.mat-mdc-select-trigger").first.click()
        for name in names:
            option = self.page.locator("mat-option").filter(has_text=name).first
            await option.locator("mat-pseudo-checkbox").click()
        await self.dismiss_overlays()
        return self

    async def submit(self) -> "VetList":
        await self.page.locator("button[type='submit']").first.click()
        return await self._back_to_list()

    async def save(self) -> "VetList":
        await self.button("Save Vet").click()
        return await self._back_to_list()

    async def _back_to_list(self) -> "VetList":
        vets = VetList(self.page)
        await vets.wait_loaded()
        return vets


class VetList(BasePage):
    """Veterinarians table"""

    @property
    def table(self) -> Locator:
        return self.page.locator(DETAILS_TABLE).first

    async def wait_loaded(self) -> None:
        await self.table.wait_for(state="visible")

    def row(self, full_name: str) -> Locator:
        return self.page.locator("tr").filter(has=self.page.locator("td", has_text=full_name)).first

    async def edit_vet(self, full_name: str) -> VetForm:
        row = self.row(full_name)
        await row.wait_for(state="attached")
        await self.button("Edit Vet", row).click()
        form = VetForm(self.page)
        await form.wait_loaded()
        return form

    async def delete_vet(self, full_name: str) -> None:
        row = self.row(full_name)
        await row.wait_for(state="attached")
        await self.button("Delete Vet", row).click()
