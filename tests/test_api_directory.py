from xml.etree import ElementTree as ET

from launderette.core.errors import GeocodingError

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


def test_geocode_requires_address(client):
    for params in ({}, {"address": "   "}):
        response = client.get("/api/geocode", params=params)
        assert response.status_code == 400
        assert response.json() == {"error": "Address parameter is required"}


def test_geocode_match(client, geocoder):
    response = client.get("/api/geocode", params={"address": " 10 Downing Street, London "})
    assert response.status_code == 200
    assert response.json() == {
        "lat": 51.5034,
        "lng": -0.1276,
        "formattedAddress": "10 Downing Street, London SW1A 2AA",
    }
    assert geocoder.calls == ["10 Downing Street, London"]


def test_geocode_no_match_is_404(client):
    response = client.get("/api/geocode", params={"address": "Nowhere at all"})
    assert response.status_code == 404
    assert response.json() == {"error": "Location not found"}


def test_geocode_upstream_failure_is_500(client, geocoder):
    async def broken(address):
        raise GeocodingError("Geocoding service unavailable")

    geocoder.geocode = broken
    response = client.get("/api/geocode", params={"address": "Leeds"})
    assert response.status_code == 500
    assert response.json() == {"error": "Geocoding service unavailable"}


def test_sitemap(client, admin_headers, listing_payload):
    plain = client.post("/api/launderettes", json=listing_payload, headers=admin_headers).json()
    premium = client.post(
        "/api/launderettes",
        json=dict(listing_payload, city="Milton Keynes", isPremium=True),
        headers=admin_headers,
    ).json()

    response = client.get("/sitemap.xml")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")

    root = ET.fromstring(response.content)
    urls = {
        url.findtext("sm:loc", namespaces=NS): url.findtext("sm:priority", namespaces=NS)
        for url in root.findall("sm:url", NS)
    }
    base = "https://launderettes.example.com"
    assert urls[base] == "1.0"
    assert urls[f"{base}/city/Leeds"] == "0.9"
    assert urls[f"{base}/city/Milton%20Keynes"] == "0.9"
    assert urls[f"{base}/launderette/{plain['id']}"] == "0.7"
    assert urls[f"{base}/launderette/{premium['id']}"] == "0.8"
