"""
Amadeus Self-Service API client.

Wraps the handful of endpoints the TraveXa search proxies use:
- OAuth2 client-credentials token
- Airport/city autocomplete (reference-data/locations)
- Flight offers search (v2)
- Hotel list by city (v1) + hotel offers (v3)

Responses are returned as raw JSON dicts; reshaping lives in
algorithms/offer_parser.py.
"""

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from travexa.interfaces.token_cache import TokenCache


# Seconds shaved off the advertised token lifetime
TOKEN_EXPIRY_MARGIN = 60


class AmadeusError(Exception):
    """Raised when an Amadeus call fails"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AmadeusClient:
    """Async client for the Amadeus REST APIs"""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        host: str = "test.api.amadeus.com",
        token_cache: Optional[TokenCache] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_secret = api_secret
        self.host = host
        self.base_url = f"https://{host}"
        self.token_cache = token_cache or TokenCache(connect=False)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_secret)

    async def aclose(self):
        await self._client.aclose()

    # ============================================
    # Auth
    # ============================================

    async def get_token(self) -> str:
        """
        Get an access token, reusing a cached one while it is valid.

        Raises:
            AmadeusError: If credentials are missing or rejected
        """
        if not self.configured:
            raise AmadeusError("Amadeus API credentials not configured")

        cache_key = f"amadeus:{self.host}:{self.api_key}"
        cached = self.token_cache.get(cache_key)
        if cached:
            return cached

        logger.info(f"[Amadeus Auth] Requesting token from {self.host}")
        response = await self._client.post(
            "/v1/security/oauth2/token",
            data={
                "grant_type": "client_credentials",
                "client_id": self.api_key,
                "client_secret": self.api_secret,
            },
            headers={"Accept": "application/json"},
        )

        if response.status_code != 200:
            logger.error(f"[Amadeus Auth Error] host={self.host} error={response.text}")
            raise AmadeusError("Failed to authenticate with Amadeus", response.status_code)

        payload = response.json()
        token = payload["access_token"]
        expires_in = int(payload.get("expires_in", 0))
        self.token_cache.set(cache_key, token, expires_in - TOKEN_EXPIRY_MARGIN)
        return token

    async def _get(self, path: str, params: Dict[str, str], error_message: str) -> Dict[str, Any]:
        token = await self.get_token()
        response = await self._client.get(
            path,
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )
        if response.status_code != 200:
            logger.error(f"[Amadeus Error] {path} status={response.status_code} body={response.text}")
            raise AmadeusError(error_message, response.status_code)
        return response.json()

    # ============================================
    # Endpoints
    # ============================================

    async def search_locations(self, keyword: str, limit: int = 10) -> Dict[str, Any]:
        """Airport and city autocomplete"""
        return await self._get(
            "/v1/reference-data/locations",
            {
                "keyword": keyword,
                "subType": "AIRPORT,CITY",
                "page[limit]": str(limit),
            },
            "Failed to search locations",
        )

    async def search_flight_offers(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        adults: int,
        currency: str = "INR",
        max_results: int = 20,
    ) -> Dict[str, Any]:
        """One-way flight offers between two IATA codes"""
        return await self._get(
            "/v2/shopping/flight-offers",
            {
                "originLocationCode": origin,
                "destinationLocationCode": destination,
                "departureDate": departure_date,
                "adults": str(adults),
                "currencyCode": currency,
                "max": str(max_results),
            },
            "Failed to search flights",
        )

    async def list_hotels_by_city(self, city_code: str) -> List[Dict[str, Any]]:
        data = await self._get(
            "/v1/reference-data/locations/hotels/by-city",
            {
                "cityCode": city_code,
                "radius": "30",
                "radiusUnit": "KM",
                "ratings": "3,4,5",
            },
            "Failed to get hotel list",
        )
        return data.get("data") or []

    async def search_hotel_offers(
        self,
        city_code: str,
        check_in_date: str,
        check_out_date: str,
        adults: int,
        rooms: int,
        currency: str = "INR",
        max_hotels: int = 15,
    ) -> Dict[str, Any]:
        """
        Hotel offers for a city.

        Looks up hotels in the city first, then prices the first
        `max_hotels` of them. If pricing fails the unpriced hotel list is
        returned in the same {"data": [...]} envelope.
        """
        hotels = await self.list_hotels_by_city(city_code)
        hotel_ids = [h["hotelId"] for h in hotels[:max_hotels] if h.get("hotelId")]

        if not hotel_ids:
            return {"data": []}

        try:
            return await self._get(
                "/v3/shopping/hotel-offers",
                {
                    "hotelIds": ",".join(hotel_ids),
                    "checkInDate": check_in_date,
                    "checkOutDate": check_out_date,
                    "adults": str(adults),
                    "roomQuantity": str(rooms),
                    "currency": currency,
                    "bestRateOnly": "true",
                },
                "Failed to get hotel offers",
            )
        except AmadeusError as e:
            logger.warning(f"[Amadeus Hotel Offers Error] {e}; returning hotel list without prices")
            return {"data": hotels}
