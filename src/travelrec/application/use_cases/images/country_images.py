"""Country image gallery use cases."""

from uuid import UUID, uuid4

from travelrec.application.dto.content_dto import CountryImagesInput
from travelrec.domain.entities import CountryImages
from travelrec.domain.exceptions import Conflict, NotFound

_DUPLICATE = "Country with this name already exists!"


class CreateCountryImagesUseCase:
    """Create a country gallery; name is unique case-insensitively."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, data: CountryImagesInput) -> CountryImages:
        async with self._uow_factory() as uow:
            if await uow.countries.get_by_name(data.name):
                raise Conflict(_DUPLICATE)
            country = CountryImages(id=uuid4(), name=data.name, images=list(data.images))
            await uow.countries.create(country)
            return country


class UpdateCountryImagesUseCase:
    """Replace a country gallery's name and images."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, country_id: UUID, data: CountryImagesInput) -> CountryImages:
        async with self._uow_factory() as uow:
            country = await uow.countries.get_by_id(country_id)
            if not country:
                raise NotFound("Country", str(country_id))
            existing = await uow.countries.get_by_name(data.name)
            if existing and existing.id != country_id:
                raise Conflict(_DUPLICATE)
            country.name = data.name
            country.images = list(data.images)
            await uow.countries.update(country)
            return country


class DeleteCountryImagesUseCase:
    """Delete a country gallery."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, country_id: UUID) -> None:
        async with self._uow_factory() as uow:
            if not await uow.countries.get_by_id(country_id):
                raise NotFound("Country", str(country_id))
            await uow.countries.delete(country_id)
