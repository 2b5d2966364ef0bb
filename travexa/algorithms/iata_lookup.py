"""
City name -> IATA code resolution for the Amadeus search proxies.

Free-text city names typed by users are mapped through a static table of
major Indian cities. Lookup order:
1. Exact match on the normalized (lowercased, trimmed) name
2. First table key that contains, or is contained in, the name
3. The first three letters, upper-cased
"""

from typing import Dict


# Airports serving major Indian cities (flight search)
AIRPORT_CODES: Dict[str, str] = {
    "delhi": "DEL", "new delhi": "DEL",
    "mumbai": "BOM", "bombay": "BOM",
    "bangalore": "BLR", "bengaluru": "BLR", "banglore": "BLR",
    "chennai": "MAA", "madras": "MAA",
    "kolkata": "CCU", "calcutta": "CCU",
    "hyderabad": "HYD", "hyb": "HYD",
    "ahmedabad": "AMD",
    "pune": "PNQ",
    "jaipur": "JAI",
    "lucknow": "LKO",
    "kochi": "COK", "cochin": "COK",
    "goa": "GOI",
    "guwahati": "GAU",
    "ranchi": "IXR",
    "patna": "PAT",
    "bhubaneswar": "BBI",
    "chandigarh": "IXC",
    "srinagar": "SXR",
    "thiruvananthapuram": "TRV", "trivandrum": "TRV",
    "varanasi": "VNS",
    "indore": "IDR",
    "nagpur": "NAG",
    "coimbatore": "CJB",
    "visakhapatnam": "VTZ", "vizag": "VTZ",
    "raipur": "RPR",
    "mangalore": "IXE",
    "amritsar": "ATQ",
    "udaipur": "UDR",
    "mysore": "MYQ", "mysuru": "MYQ",
    "bhopal": "BHO",
    "madurai": "IXM",
    "leh": "IXL",
    "imphal": "IMF",
    "agartala": "IXA",
    "port blair": "IXZ",
    "dehradun": "DED",
    "jammu": "IXJ",
    "rajkot": "RAJ",
    "vadodara": "BDQ", "baroda": "BDQ",
    "surat": "STV",
    "bagdogra": "IXB",
    "siliguri": "IXB",
    "jodhpur": "JDH",
    "aurangabad": "IXU",
    "tirupati": "TIR",
    "vijayawada": "VGA",
    "hubli": "HBX",
    "belgaum": "IXG",
}

# City codes for hotel search; hill stations and resort towns map to the
# nearest city with an airport
CITY_CODES: Dict[str, str] = {
    "delhi": "DEL", "new delhi": "DEL",
    "mumbai": "BOM", "bombay": "BOM",
    "bangalore": "BLR", "bengaluru": "BLR", "banglore": "BLR",
    "chennai": "MAA", "madras": "MAA",
    "kolkata": "CCU", "calcutta": "CCU",
    "hyderabad": "HYD",
    "ahmedabad": "AMD",
    "pune": "PNQ",
    "jaipur": "JAI",
    "lucknow": "LKO",
    "kochi": "COK", "cochin": "COK",
    "goa": "GOI",
    "guwahati": "GAU",
    "ranchi": "IXR",
    "patna": "PAT",
    "bhubaneswar": "BBI",
    "chandigarh": "IXC",
    "srinagar": "SXR",
    "thiruvananthapuram": "TRV", "trivandrum": "TRV",
    "varanasi": "VNS",
    "indore": "IDR",
    "nagpur": "NAG",
    "coimbatore": "CJB",
    "visakhapatnam": "VTZ", "vizag": "VTZ",
    "raipur": "RPR",
    "udaipur": "UDR",
    "jodhpur": "JDH",
    "agra": "AGR",
    "shimla": "SLV",
    "manali": "KUU",
    "rishikesh": "DED",
    "mysore": "MYQ", "mysuru": "MYQ",
    "ooty": "CJB",
    "darjeeling": "IXB",
    "gangtok": "IXB",
    "munnar": "COK",
    "alleppey": "COK",
    "pondicherry": "PNY",
}


def resolve_code(name: str, table: Dict[str, str]) -> str:
    """
    Resolve a free-text place name against a code table.

    Args:
        name: City name as typed by the user
        table: Lowercase name -> IATA code mapping

    Returns:
        Three-letter code (may be a guess for unknown cities)
    """
    normalized = name.lower().strip()

    if normalized in table:
        return table[normalized]

    # Dict order is insertion order, so the first listed alias wins
    for key, code in table.items():
        if key in normalized or normalized in key:
            return code

    return normalized[:3].upper()


def resolve_airport_code(city: str) -> str:
    return resolve_code(city, AIRPORT_CODES)


def resolve_city_code(city: str) -> str:
    return resolve_code(city, CITY_CODES)
