"""FlixPatrol data types and static enumerations.

Closed sets of FlixPatrol location and platform slugs, the two
ranking content types, and the shapes produced by the top 10
resolver.
"""

from dataclasses import dataclass
from typing import Literal, NotRequired, TypedDict, TypeGuard

# =============================================================================
# ENUMERATIONS
# =============================================================================

WORLD_LOCATION = "world"

FLIXPATROL_LOCATIONS: frozenset[str] = frozenset(
    {
        "world",
        "afghanistan",
        "albania",
        "algeria",
        "andorra",
        "angola",
        "antigua-and-barbuda",
        "argentina",
        "armenia",
        "australia",
        "austria",
        "azerbaijan",
        "bahamas",
        "bahrain",
        "bangladesh",
        "barbados",
        "belarus",
        "belgium",
        "belize",
        "benin",
        "bhutan",
        "bolivia",
        "bosnia-and-herzegovina",
        "botswana",
        "brazil",
        "brunei",
        "bulgaria",
        "burkina-faso",
        "burundi",
        "cambodia",
        "cameroon",
        "canada",
        "cape-verde",
        "central-african-republic",
        "chad",
        "chile",
        "china",
        "colombia",
        "comoros",
        "costa-rica",
        "croatia",
        "cyprus",
        "czech-republic",
        "democratic-republic-of-the-congo",
        "denmark",
        "djibouti",
        "dominica",
        "dominican-republic",
        "east-timor",
        "ecuador",
        "egypt",
        "equatorial-guinea",
        "eritrea",
        "estonia",
        "ethiopia",
        "fiji",
        "finland",
        "france",
        "gabon",
        "gambia",
        "georgia",
        "germany",
        "ghana",
        "greece",
        "grenada",
        "guadeloupe",
        "guatemala",
        "guinea",
        "guinea-bissau",
        "guyana",
        "haiti",
        "honduras",
        "hong-kong",
        "hungary",
        "iceland",
        "india",
        "indonesia",
        "iraq",
        "ireland",
        "israel",
        "italy",
        "ivory-coast",
        "jamaica",
        "japan",
        "jordan",
        "kazakhstan",
        "kenya",
        "kiribati",
        "kosovo",
        "kuwait",
        "kyrgyzstan",
        "laos",
        "latvia",
        "lebanon",
        "lesotho",
        "liberia",
        "libya",
        "liechtenstein",
        "lithuania",
        "luxembourg",
        "madagascar",
        "malawi",
        "malaysia",
        "maldives",
        "mali",
        "malta",
        "marshall-islands",
        "martinique",
        "mauritania",
        "mauritius",
        "mexico",
        "micronesia",
        "moldova",
        "monaco",
        "mongolia",
        "montenegro",
        "morocco",
        "mozambique",
        "myanmar",
        "namibia",
        "nauru",
        "nepal",
        "netherlands",
        "new-caledonia",
        "new-zealand",
        "nicaragua",
        "niger",
        "nigeria",
        "north-macedonia",
        "norway",
        "oman",
        "pakistan",
        "palau",
        "palestine",
        "panama",
        "papua-new-guinea",
        "paraguay",
        "peru",
        "philippines",
        "poland",
        "portugal",
        "qatar",
        "republic-of-the-congo",
        "reunion",
        "romania",
        "russia",
        "rwanda",
        "saint-kitts-and-nevis",
        "saint-lucia",
        "saint-vincent-and-the-grenadines",
        "salvador",
        "samoa",
        "san-marino",
        "sao-tome-and-principe",
        "saudi-arabia",
        "senegal",
        "serbia",
        "seychelles",
        "sierra-leone",
        "singapore",
        "slovakia",
        "slovenia",
        "solomon-islands",
        "somalia",
        "south-africa",
        "south-korea",
        "south-sudan",
        "spain",
        "sri-lanka",
        "sudan",
        "suriname",
        "swaziland",
        "sweden",
        "switzerland",
        "taiwan",
        "tajikistan",
        "tanzania",
        "thailand",
        "togo",
        "tonga",
        "trinidad-and-tobago",
        "tunisia",
        "turkey",
        "turkmenistan",
        "tuvalu",
        "uganda",
        "ukraine",
        "united-arab-emirates",
        "united-kingdom",
        "united-states",
        "uruguay",
        "uzbekistan",
        "vanuatu",
        "vatican-city",
        "venezuela",
        "vietnam",
        "yemen",
        "zambia",
        "zimbabwe",
    }
)

FLIXPATROL_PLATFORMS: frozenset[str] = frozenset(
    {
        "netflix",
        "hbo",
        "disney",
        "amazon",
        "amazon-prime",
        "apple-tv",
        "chili",
        "freevee",
        "google",
        "hulu",
        "itunes",
        "osn",
        "paramount-plus",
        "rakuten-tv",
        "shahid",
        "star-plus",
        "starz",
        "viaplay",
        "vudu",
    }
)

FlixPatrolType = Literal["Movies", "TV Shows"]

FLIXPATROL_TYPES: tuple[FlixPatrolType, ...] = ("Movies", "TV Shows")

# Suffix of the world ranking container id: "<platform>-1" / "<platform>-2"
TYPE_CONTAINER_SUFFIX: dict[str, int] = {"Movies": 1, "TV Shows": 2}


def is_location(candidate: str) -> bool:
    """Check a slug against the known FlixPatrol locations."""
    return candidate in FLIXPATROL_LOCATIONS


def is_platform(candidate: str) -> bool:
    """Check a slug against the known FlixPatrol platforms."""
    return candidate in FLIXPATROL_PLATFORMS


def is_content_type(candidate: str) -> TypeGuard[FlixPatrolType]:
    """Check a label against the ranking content types."""
    return candidate in FLIXPATROL_TYPES


# =============================================================================
# OPTIONS AND RESULTS
# =============================================================================


@dataclass(frozen=True)
class FlixPatrolOptions:
    """Connection options for the FlixPatrol resolver.

    Unset values are filled from settings when the resolver is built.

    Attributes:
        url: FlixPatrol base URL.
        agent: User-Agent header sent with every request.
    """

    url: str | None = None
    agent: str | None = None


class Top10Result(TypedDict):
    """Resolved top 10 for one content type, platform and location."""

    type: str
    platform: str
    location: str
    fallback: str | None
    tmdb_ids: list[str]
    count: NotRequired[int]
