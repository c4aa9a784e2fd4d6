from launderette.schemas.common import CamelModel


class GeocodingResult(CamelModel):
    lat: float
    lng: float
    formatted_address: str
