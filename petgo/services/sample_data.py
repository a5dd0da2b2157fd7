"""Hard-coded sample pins used to populate the map.

Six well-known locations per category, spread across world regions. The catalogue
is static; every call returns freshly constructed pins with new identifiers.
"""

from __future__ import annotations

from petgo.schemas.place import Amenity, Coordinate, Place, PlaceCategory, PlacePin

_SAMPLE_LOCATIONS: dict[PlaceCategory, tuple[tuple[str, float, float], ...]] = {
    PlaceCategory.PARK: (
        ("Central Park", 40.7829, -73.9654),
        ("Hyde Park", 51.5073, -0.1657),
        ("Ueno Park", 35.7156, 139.7745),
        ("Tiergarten", 52.5145, 13.3501),
        ("Stanley Park", 49.3043, -123.1443),
        ("Ibirapuera Park", -23.5874, -46.6576),
    ),
    PlaceCategory.CAFE: (
        ("Paris Café", 48.8566, 2.3522),
        ("Melbourne Brew", -37.8136, 144.9631),
        ("Seattle Roasters", 47.6062, -122.3321),
        ("Seoul Beans", 37.5665, 126.9780),
        ("Rome Espresso", 41.9028, 12.4964),
        ("Cape Town Coffee", -33.9249, 18.4241),
    ),
    PlaceCategory.HOTEL: (
        ("Dubai Marina Hotel", 25.0800, 55.1400),
        ("Singapore Bay Hotel", 1.2869, 103.8546),
        ("NYC Skyline Hotel", 40.7580, -73.9855),
        ("Tokyo Central Hotel", 35.6812, 139.7671),
        ("London River Hotel", 51.5074, -0.1278),
        ("Madrid Centro Hotel", 40.4168, -3.7038),
    ),
    PlaceCategory.BEACH: (
        ("Copacabana", -22.9711, -43.1822),
        ("Bondi Beach", -33.8908, 151.2743),
        ("Waikiki", 21.2767, -157.8275),
        ("Bali Kuta", -8.7177, 115.1687),
        ("Nice Promenade", 43.6950, 7.2656),
        ("Phuket Patong", 7.8966, 98.2960),
    ),
    PlaceCategory.VET: (
        ("Tokyo Vet Clinic", 35.6895, 139.6917),
        ("Paris Animal Care", 48.8566, 2.3522),
        ("NYC Pet Health", 40.7128, -74.0060),
        ("Sydney Vet Center", -33.8688, 151.2093),
        ("Johannesburg Vet", -26.2041, 28.0473),
        ("Toronto Vet", 43.6532, -79.3832),
    ),
}

# Placeholder details shown when a pin is opened; the sample catalogue carries
# no per-place metadata.
PLACEHOLDER_RATING = 4.5
PLACEHOLDER_REVIEWS_COUNT = 128
PLACEHOLDER_ADDRESS = "123 Puppy Lane, Petville"
PLACEHOLDER_DISTANCE = "Approx. 1.2 miles away"
PLACEHOLDER_HOURS = "Open 8:00 AM – 6:00 PM"
PLACEHOLDER_PHONE = "(555) 123-4567"


def make_sample_pins() -> list[PlacePin]:
    """Return the 30 sample pins grouped parks, cafes, hotels, beaches, vets."""

    pins: list[PlacePin] = []
    for category, locations in _SAMPLE_LOCATIONS.items():
        pins.extend(
            PlacePin(
                title=title,
                coordinate=Coordinate(latitude=latitude, longitude=longitude),
                symbol=category.symbol,
                category=category,
            )
            for title, latitude, longitude in locations
        )
    return pins


def place_from_pin(pin: PlacePin) -> Place:
    """Expand a selected pin into the place shown on the details sheet."""

    return Place(
        title=pin.title,
        category=pin.category,
        rating=PLACEHOLDER_RATING,
        reviews_count=PLACEHOLDER_REVIEWS_COUNT,
        coordinate=pin.coordinate,
        address=PLACEHOLDER_ADDRESS,
        distance_text=PLACEHOLDER_DISTANCE,
        hours_text=PLACEHOLDER_HOURS,
        phone=PLACEHOLDER_PHONE,
        amenities=tuple(Amenity),
    )


__all__ = ["make_sample_pins", "place_from_pin"]
