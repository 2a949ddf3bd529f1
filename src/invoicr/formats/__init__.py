"""Registre des formats e-facture et sélection du format.

FR: Fusionne les tables régionales (Europe, Asie-Pacifique, Moyen-Orient,
    Amérique latine, Afrique, Amérique du Nord) en une table unique
    pays → formats, et fournit les fonctions de sélection. Les recherches
    ne lèvent jamais d'exception : un pays inconnu donne une liste vide
    ou None.
EN: Merges the regional tables into a single country → formats table and
    provides the selection functions. Lookups never raise: an unknown
    country yields an empty list or None.
"""

from invoicr.formats.africa import AFRICA_COUNTRY_NAMES, AFRICA_FORMATS
from invoicr.formats.asia_pacific import (
    ASIA_PACIFIC_COUNTRY_NAMES,
    ASIA_PACIFIC_FORMATS,
)
from invoicr.formats.europe import (
    EU_FORMATS,
    EUROPE_COUNTRY_NAMES,
    EUROPE_FORMATS,
    NON_EU_EUROPE_FORMATS,
)
from invoicr.formats.latin_america import (
    LATIN_AMERICA_COUNTRY_NAMES,
    LATIN_AMERICA_FORMATS,
)
from invoicr.formats.middle_east import (
    MIDDLE_EAST_COUNTRY_NAMES,
    MIDDLE_EAST_FORMATS,
)
from invoicr.formats.north_america import (
    NORTH_AMERICA_COUNTRY_NAMES,
    NORTH_AMERICA_FORMATS,
)
from invoicr.formats.types import CountryFormats
from invoicr.models.enums import CountryCode, FormatId
from invoicr.models.results import FormatDescriptor

FORMAT_MAP: CountryFormats = {
    **EUROPE_FORMATS,
    **ASIA_PACIFIC_FORMATS,
    **MIDDLE_EAST_FORMATS,
    **LATIN_AMERICA_FORMATS,
    **AFRICA_FORMATS,
    **NORTH_AMERICA_FORMATS,
}

COUNTRY_NAMES: dict[CountryCode, str] = {
    **EUROPE_COUNTRY_NAMES,
    **ASIA_PACIFIC_COUNTRY_NAMES,
    **MIDDLE_EAST_COUNTRY_NAMES,
    **LATIN_AMERICA_COUNTRY_NAMES,
    **AFRICA_COUNTRY_NAMES,
    **NORTH_AMERICA_COUNTRY_NAMES,
}

_REGIONS: dict[str, CountryFormats] = {
    "Europe": EUROPE_FORMATS,
    "Asia-Pacific": ASIA_PACIFIC_FORMATS,
    "Middle East": MIDDLE_EAST_FORMATS,
    "Latin America": LATIN_AMERICA_FORMATS,
    "Africa": AFRICA_FORMATS,
    "North America": NORTH_AMERICA_FORMATS,
}


def coerce_country(value: CountryCode | str | None) -> CountryCode | None:
    """Convertit une chaîne en CountryCode, None si le code est inconnu.

    FR: Point de passage pour les codes venant de l'extérieur (CLI, JSON) :
        la casse est normalisée, les codes hors registre sont rejetés.
    EN: Entry point for codes coming from outside; unknown codes are
        rejected as None.
    """
    if not value:
        return None
    try:
        return CountryCode(str(value).strip().upper())
    except ValueError:
        return None


# --- Registre ---


def available_formats(country: CountryCode | str | None) -> list[FormatDescriptor]:
    """Formats disponibles pour un pays (liste vide si aucun)."""
    if not country:
        return []
    return list(FORMAT_MAP.get(country, []))


def country_name(country: CountryCode | str) -> str:
    """Nom d'affichage du pays, ou le code brut s'il n'est pas répertorié."""
    return COUNTRY_NAMES.get(country, str(country))


def supported_countries() -> list[CountryCode]:
    """Tous les pays ayant au moins une entrée dans le registre."""
    return list(FORMAT_MAP)


def all_formats() -> set[FormatId]:
    """Tous les formats référencés par au moins un pays."""
    return {
        descriptor.format
        for descriptors in FORMAT_MAP.values()
        for descriptor in descriptors
    }


def countries_supporting(fmt: FormatId | str) -> list[CountryCode]:
    """Pays proposant le format donné, dans l'ordre du registre."""
    return [
        country
        for country, descriptors in FORMAT_MAP.items()
        if any(d.format == fmt for d in descriptors)
    ]


def country_for_format(fmt: FormatId | str) -> CountryCode | None:
    """Premier pays proposant le format donné."""
    countries = countries_supporting(fmt)
    return countries[0] if countries else None


def countries_by_region() -> dict[str, list[CountryCode]]:
    """Pays regroupés par région, pour l'affichage."""
    return {region: list(table) for region, table in _REGIONS.items()}


# --- Sélection ---


def formats_for_transaction(
    provider_country: CountryCode | str | None = None,
    client_country: CountryCode | str | None = None,
) -> list[FormatDescriptor]:
    """Formats proposés pour un couple prestataire/client.

    FR: Ne propose des formats que si les deux pays sont renseignés et
        identiques. Pour savoir si une génération transfrontalière est
        possible, utiliser can_generate().
    EN: Only offers formats when both countries are set and equal. Use
        can_generate() to know whether cross-border generation is possible.
    """
    if not provider_country or not client_country:
        return []
    if provider_country != client_country:
        return []
    return available_formats(provider_country)


def can_generate(
    provider_country: CountryCode | str | None = None,
    client_country: CountryCode | str | None = None,
) -> bool:
    """Vrai si les deux pays ont chacun au moins un format enregistré.

    FR: Plus permissif que formats_for_transaction() : autorise les
        couples de pays différents (génération transfrontalière PEPPOL).
    EN: Looser than formats_for_transaction(): allows different countries
        (cross-border PEPPOL-style generation).
    """
    if not provider_country or not client_country:
        return False
    return bool(available_formats(provider_country)) and bool(
        available_formats(client_country)
    )


def default_format(
    country: CountryCode | str | None,
    preferred: FormatId | str | None = None,
) -> FormatDescriptor | None:
    """Format par défaut d'un pays, éventuellement remplacé par une préférence.

    Args:
        country: Le pays dont on cherche le format.
        preferred: Format souhaité ; ignoré s'il n'est pas proposé par le pays.

    Returns:
        Le descripteur préféré s'il est valide pour le pays, sinon le premier
        format du pays, ou None si le pays n'a aucun format.
    """
    available = available_formats(country)
    if not available:
        return None
    if preferred:
        for descriptor in available:
            if descriptor.format == preferred:
                return descriptor
    return available[0]


def is_valid_for_country(
    fmt: FormatId | str, country: CountryCode | str | None
) -> bool:
    """Vrai si le format est proposé par le pays."""
    return any(d.format == fmt for d in available_formats(country))


def format_info(fmt: FormatId | str) -> FormatDescriptor | None:
    """Premier descripteur du format dans tout le registre.

    FR: Sert uniquement aux métadonnées descriptives (extension, MIME),
        jamais à décider de la validité d'un format pour un pays.
    EN: Descriptive metadata only, never used for validity decisions.
    """
    for descriptors in FORMAT_MAP.values():
        for descriptor in descriptors:
            if descriptor.format == fmt:
                return descriptor
    return None


__all__ = [
    "COUNTRY_NAMES",
    "EU_FORMATS",
    "FORMAT_MAP",
    "NON_EU_EUROPE_FORMATS",
    "all_formats",
    "available_formats",
    "can_generate",
    "coerce_country",
    "countries_by_region",
    "countries_supporting",
    "country_for_format",
    "country_name",
    "default_format",
    "format_info",
    "formats_for_transaction",
    "is_valid_for_country",
    "supported_countries",
]
