"""Built-in locales for the citation engine."""

import logging

import msgspec

logger = logging.getLogger(__name__)

# Terms every locale falls back to when it does not define its own.
DEFAULT_TERMS = {
    "and": "and",
    "et-al": "et al.",
    "no-date": "n.d.",
    "in": "In",
    "edition": "ed.",
    "editor": "Ed.",
    "volume": "vol.",
    "issue": "no.",
    "page": "p.",
    "pages": "pp.",
    "retrieved": "Retrieved from",
    "available": "Available:",
    "accessed": "accessed",
    "open-quote": "“",
    "close-quote": "”",
}

LOCALES: dict[str, dict] = {
    "en-US": {
        "lang": "en-US",
        "terms": DEFAULT_TERMS,
        "months": [
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ],
    },
    "en-GB": {
        "lang": "en-GB",
        "terms": {
            **DEFAULT_TERMS,
            "open-quote": "‘",
            "close-quote": "’",
        },
        "months": [
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ],
    },
    "de-DE": {
        "lang": "de-DE",
        "terms": {
            "and": "und",
            "et-al": "u. a.",
            "no-date": "o. J.",
            "in": "In",
            "edition": "Aufl.",
            "editor": "Hrsg.",
            "volume": "Bd.",
            "issue": "Nr.",
            "page": "S.",
            "pages": "S.",
            "retrieved": "Abgerufen von",
            "available": "Verfügbar unter:",
            "accessed": "zugegriffen",
            "open-quote": "„",
            "close-quote": "“",
        },
        "months": [
            "Januar",
            "Februar",
            "März",
            "April",
            "Mai",
            "Juni",
            "Juli",
            "August",
            "September",
            "Oktober",
            "November",
            "Dezember",
        ],
    },
    "fr-FR": {
        "lang": "fr-FR",
        "terms": {
            "and": "et",
            "et-al": "et al.",
            "no-date": "s. d.",
            "in": "In",
            "edition": "éd.",
            "editor": "éd.",
            "volume": "vol.",
            "issue": "n°",
            "page": "p.",
            "pages": "p.",
            "retrieved": "Consulté à l’adresse",
            "available": "Disponible sur :",
            "accessed": "consulté le",
            "open-quote": "« ",
            "close-quote": " »",
        },
        "months": [
            "janvier",
            "février",
            "mars",
            "avril",
            "mai",
            "juin",
            "juillet",
            "août",
            "septembre",
            "octobre",
            "novembre",
            "décembre",
        ],
    },
    "es-ES": {
        "lang": "es-ES",
        "terms": {
            "and": "y",
            "et-al": "et al.",
            "no-date": "s. f.",
            "in": "En",
            "edition": "ed.",
            "editor": "ed.",
            "volume": "vol.",
            "issue": "n.º",
            "page": "p.",
            "pages": "pp.",
            "retrieved": "Recuperado de",
            "available": "Disponible en:",
            "accessed": "accedido",
            "open-quote": "«",
            "close-quote": "»",
        },
        "months": [
            "enero",
            "febrero",
            "marzo",
            "abril",
            "mayo",
            "junio",
            "julio",
            "agosto",
            "septiembre",
            "octubre",
            "noviembre",
            "diciembre",
        ],
    },
    "nl-NL": {
        "lang": "nl-NL",
        "terms": {
            "and": "en",
            "et-al": "e.a.",
            "no-date": "z.d.",
            "in": "In",
            "edition": "dr.",
            "editor": "red.",
            "volume": "vol.",
            "issue": "nr.",
            "page": "p.",
            "pages": "pp.",
            "retrieved": "Opgehaald van",
            "available": "Beschikbaar op:",
            "accessed": "geraadpleegd",
            "open-quote": "‘",
            "close-quote": "’",
        },
        "months": [
            "januari",
            "februari",
            "maart",
            "april",
            "mei",
            "juni",
            "juli",
            "augustus",
            "september",
            "oktober",
            "november",
            "december",
        ],
    },
}

# Region used when only a primary language subtag is requested.
PRIMARY_DIALECTS = {
    "en": "en-US",
    "de": "de-DE",
    "fr": "fr-FR",
    "es": "es-ES",
    "nl": "nl-NL",
}


def resolve_lang(lang: str) -> str | None:
    """Map an RFC 5646 tag to a built-in locale name."""
    if not lang:
        return None
    if lang in LOCALES:
        return lang
    lowered = {name.lower(): name for name in LOCALES}
    if lang.lower() in lowered:
        return lowered[lang.lower()]
    return PRIMARY_DIALECTS.get(lang.split("-")[0].lower())


def fetch_locale(lang: str) -> str | None:
    """Get locale data as JSON text.

    Args:
        lang: RFC 5646 language tag.

    Returns:
        Locale JSON, or None if the language is not available.
    """
    name = resolve_lang(lang)
    if name is None:
        logger.debug(f"Locale not available: {lang}")
        return None
    return msgspec.json.encode(LOCALES[name]).decode("utf-8")


def list_locales() -> list[str]:
    """List built-in locale names."""
    return list(LOCALES)
