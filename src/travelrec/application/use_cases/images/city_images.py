"""City image gallery use cases."""

from uuid import UUID, uuid4

from travelrec.application.dto.content_dto import CityImagesInput
from travelrec.domain.entities import CityImages
from travelrec.domain.exceptions import Conflict, NotFound

_DUPLICATE = "City in this country with this name already exists!"


class CreateCityImagesUseCase:
    """Create a city gallery; name is unique within the country."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, data: CityImagesInput) -> CityImages:
        async with self._uow_factory() as uow:
            if await uow.cities.get_by_name(data.name, data.country):
                raise Conflict(_DUPLICATE)
            city = CityImages(
                id=uuid4(), name=data.name, country=data.country, images=list(data.images)
            )
            await uow.cities.create(city)
            return city


class UpdateCityImagesUseCase:
    """Replace a city gallery's name, country and images."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, city_id: UUID, data: CityImagesInput) -> CityImages:
        async with self._uow_factory() as uow:
            city = await uow.cities.get_by_id(city_id)
            if not city:
                raise NotFound("City", str(city_id))
            existing = await uow.cities.get_by_name(data.name, data.country)
            if existing and existing.id != city_id:
                raise Conflict(_DUPLICATE)
            city.name = data.name
            city.country = data.country
            city.images = list(data.images)
            await uow.cities.update(city)
            return city


class DeleteCityImagesUseCase:
    """Delete a city gallery."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, city_id: UUID) -> None:
        async with self._uow_factory() as uow:
            if not await uow.cities.get_by_id(city_id):
                raise NotFound("City", str(city_id))
            await uow.cities.delete(city_id)
