"""Region enumeration for League of Legends servers."""
from enum import Enum

_REGIONAL_ROUTES = {
    # Americas
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",

    # Europe
    "euw1": "europe",
    "eun1": "europe",
    "tr1": "europe",
    "ru": "europe",
    "me1": "europe",

    # Asia
    "kr": "asia",
    "jp1": "asia",

    # SEA
    "oc1": "sea",
    "ph2": "sea",
    "sg2": "sea",
    "th2": "sea",
    "tw2": "sea",
    "vn2": "sea",
}

_FRIENDLY = {
    "eun1": "eune",
    "la1": "lan",
    "la2": "las",
    "oc1": "oce",
}


class Region(Enum):
    """League of Legends platform servers.

    Account-v1 and match-v5 live on the regional routing hosts
    (``europe``, ``americas``, ...) rather than on the platform itself.
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def regional_route(self) -> str:
        """Get regional routing host for account and match APIs."""
        return _REGIONAL_ROUTES[self.value]

    @property
    def friendly(self) -> str:
        """Short label for console output (``euw``, ``eune``, ``kr``)."""
        if self.value in _FRIENDLY:
            return _FRIENDLY[self.value]
        code = self.value
        return code[:-1] if code[-1].isdigit() else code

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Resolve a platform code (``euw1``), a friendly label (``euw``) or a
        regional route (``europe``, first matching platform wins)."""
        code = value.strip().lower()
        for region in cls:
            if code in (region.value, region.friendly):
                return region
        for region in cls:
            if region.regional_route == code:
                return region
        raise ValueError(f"unknown region {value!r}")
