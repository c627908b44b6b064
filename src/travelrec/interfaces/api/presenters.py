"""Entity to JSON mapping. Password hashes are never rendered."""

from dataclasses import asdict
from typing import Any

from travelrec.domain.entities import (
    CityImages,
    Collection,
    CountryImages,
    Permission,
    Place,
    Recommendation,
    Role,
    User,
)


def public_user(user: User) -> dict[str, Any]:
    """Profile fields safe to embed in other documents."""
    return {
        "_id": str(user.id),
        "firstName": user.first_name,
        "lastName": user.last_name,
        "username": user.username,
        "profilePicture": user.profile_picture,
        "bio": user.bio,
        "country": user.country,
        "city": user.city,
        "socials": [asdict(s) for s in user.socials],
    }


def user_to_dict(user: User, role: Role | None = None) -> dict[str, Any]:
    data = public_user(user)
    data["email"] = user.email
    data["registerDate"] = user.register_date.isoformat()
    data["role"] = role_to_dict(role) if role else str(user.role_id)
    return data


def permission_to_dict(permission: Permission) -> dict[str, Any]:
    return {
        "_id": str(permission.id),
        "name": permission.name,
        "description": permission.description,
    }


def role_to_dict(role: Role, permissions: list[Permission] | None = None) -> dict[str, Any]:
    return {
        "_id": str(role.id),
        "name": role.name,
        "permissions": (
            [permission_to_dict(p) for p in permissions]
            if permissions is not None
            else [str(p) for p in role.permission_ids]
        ),
    }


def place_to_dict(place: Place) -> dict[str, Any]:
    loc = place.location
    return {
        "_id": str(place.id),
        "name": place.name,
        "description": place.description,
        "images": list(place.images),
        "location": {
            "continent": loc.continent,
            "country": loc.country,
            "city": loc.city,
            "street": loc.street,
            "streetNumber": loc.street_number,
        },
        "upvotes": place.upvotes,
        "tags": list(place.tags),
        "approved": place.approved,
        "_createdBy": str(place.created_by),
    }


def recommendation_to_dict(
    rec: Recommendation, creator: User | None = None, place: Place | None = None
) -> dict[str, Any]:
    return {
        "_id": str(rec.id),
        "_createdBy": public_user(creator) if creator else str(rec.created_by),
        "place": place_to_dict(place) if place else str(rec.place_id),
        "title": rec.title,
        "content": rec.content,
        "dateOfVisit": rec.date_of_visit.isoformat(),
        "dateOfWriting": rec.date_of_writing.isoformat(),
        "rating": rec.rating,
        "upvotes": rec.upvotes,
    }


def collection_to_dict(
    collection: Collection, creator: User | None = None, places: list[Place] | None = None
) -> dict[str, Any]:
    return {
        "_id": str(collection.id),
        "_createdBy": public_user(creator) if creator else str(collection.created_by),
        "name": collection.name,
        "places": (
            [place_to_dict(p) for p in places]
            if places is not None
            else [str(p) for p in collection.place_ids]
        ),
        "visible": collection.visible,
    }


def city_to_dict(city: CityImages) -> dict[str, Any]:
    return {
        "_id": str(city.id),
        "name": city.name,
        "country": city.country,
        "images": [asdict(i) for i in city.images],
    }


def country_to_dict(country: CountryImages) -> dict[str, Any]:
    return {
        "_id": str(country.id),
        "name": country.name,
        "images": [asdict(i) for i in country.images],
    }
