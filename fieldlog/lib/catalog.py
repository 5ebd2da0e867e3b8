"""
Display text catalog.

Every fixed string fieldlog prints (variant labels, detail clauses, and the
log and shell messages) lives in a Catalog. Two locales are built in; a YAML
file can override individual entries on top of either one.

CATALOG FILE
============

    locale: es            # optional, base locale for the overrides
    labels:
      tree: ARBOL
    details:
      tree_height: "{height} mts"
    messages:
      registered: "--- Planta guardada."

Detail templates are str.format strings. The available fields are
{count} for shrub_stems and {height} for tree_height; the others take none.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from . import validate

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Labels are shared by both locales.
DEFAULT_LABELS = {
    "herb": "HIERBA",
    "shrub": "MATA",
    "bush": "ARBUSTO",
    "tree": "ARBOL",
}

# Sample values used to check detail templates at load time
DETAIL_FIELDS = {
    "herb_medicinal": {},
    "herb_decorative": {},
    "shrub_stems": {"count": 0},
    "bush_thorns": {},
    "bush_smooth": {},
    "tree_height": {"height": "0"},
}

_EN_DETAILS = {
    "herb_medicinal": "Medicinal",
    "herb_decorative": "Decorative",
    "shrub_stems": "Stems: {count}",
    "bush_thorns": "With Thorns",
    "bush_smooth": "Smooth",
    "tree_height": "{height} m",
}

_ES_DETAILS = {
    "herb_medicinal": "Medicinal",
    "herb_decorative": "Decorativa",
    "shrub_stems": "Tallos: {count}",
    "bush_thorns": "Con Espinas",
    "bush_smooth": "Suave",
    "tree_height": "{height} m",
}

_EN_MESSAGES = {
    # Record line
    "climate": "Clima",

    # FieldLog
    "registered": "--- The plant has been registered :).",
    "empty": "The field log is empty.",
    "header": "=== PLANT LISTING ===",
    "no_matches": "You haven't registered any plant here yet :)",
    "footer": "=====================",

    # Shell
    "title": "=== FIELD LOG ===",
    "main_menu": "MAIN MENU\n1. Register new plant\n2. View field log\n3. Exit",
    "main_prompt": "Your choice: ",
    "invalid_option": "---Invalid option.",
    "goodbye": "Exiting...",
    "register_header": "--- REGISTER PLANT ---",
    "register_menu": "1. Herb | 2. Shrub | 3. Bush | 4. Tree",
    "register_prompt": "Select: ",
    "wrong_category": ">> Wrong option",
    "name_prompt": "Common name: ",
    "climate_prompt": "Ideal climate: ",
    "medicinal_prompt": "Is it medicinal? (1:Yes / 0:No): ",
    "stems_prompt": "Number of stems: ",
    "thorns_prompt": "Does it have thorns? (1:Yes / 0:No): ",
    "height_prompt": "Height (m): ",
    "not_a_number": ">> Please enter a number",
    "filter_header": "--- FILTERS ---",
    "filter_menu": "0.All | 1.Herbs | 2.Shrubs | 3.Bushes | 4.Trees",
    "filter_prompt": "Choose an option: ",
    "unknown_category": ">> That category does not exist.",
}

_ES_MESSAGES = {
    "climate": "Clima",

    "registered": "--- La planta se ha registrado :).",
    "empty": "La bitacora esta vacia.",
    "header": "=== LISTADO DE PLANTAS ===",
    "no_matches": "Aun no has registrado ninguna planta aqui :)",
    "footer": "==========================",

    "title": "=== BITACORA DE CAMPO ===",
    "main_menu": "MENU PRINCIPAL\n1. Registrar nueva planta\n2. Ver Bitacora\n3. Salir",
    "main_prompt": "Tu seleccion: ",
    "invalid_option": "---Opcion no valida.",
    "goodbye": "Saliendooo...",
    "register_header": "--- REGISTRAR PLANTA ---",
    "register_menu": "1. Hierba | 2. Mata | 3. Arbusto | 4. Arbol",
    "register_prompt": "Selecciona: ",
    "wrong_category": ">> Opcion incorrecta",
    "name_prompt": "Nombre Comun: ",
    "climate_prompt": "Clima ideal: ",
    "medicinal_prompt": "Es medicinal? (1:Si / 0:No): ",
    "stems_prompt": "Numero de Tallos: ",
    "thorns_prompt": "Tiene espinas? (1:Si / 0:No): ",
    "height_prompt": "Altura (mts): ",
    "not_a_number": ">> Ingresa un numero",
    "filter_header": "--- FILTROS ---",
    "filter_menu": "0.Todo | 1.Hierbas | 2.Matas | 3.Arbustos | 4.Arboles",
    "filter_prompt": "Elije una opcion: ",
    "unknown_category": ">> Esa categoria no existe.",
}

_BUILTIN = {
    "en": (_EN_DETAILS, _EN_MESSAGES),
    "es": (_ES_DETAILS, _ES_MESSAGES),
}

LOCALES = tuple(_BUILTIN)


@dataclass(frozen=True)
class Catalog:
    """Fixed display strings for one locale."""
    locale: str
    labels: dict[str, str] = field(default_factory=lambda: DEFAULT_LABELS.copy())
    details: dict[str, str] = field(default_factory=lambda: _EN_DETAILS.copy())
    messages: dict[str, str] = field(default_factory=lambda: _EN_MESSAGES.copy())

    def label(self, kind: str) -> str:
        return self.labels[kind]

    def detail(self, key: str, **fields) -> str:
        return self.details[key].format(**fields)

    def message(self, key: str) -> str:
        return self.messages[key]


def builtin_catalog(locale: str = DEFAULT_LOCALE) -> Catalog:
    """Return a fresh built-in catalog, falling back to the default locale."""
    if locale not in _BUILTIN:
        logger.warning(f"Unknown locale '{locale}', using '{DEFAULT_LOCALE}'")
        locale = DEFAULT_LOCALE
    details, messages = _BUILTIN[locale]
    return Catalog(
        locale=locale,
        labels=DEFAULT_LABELS.copy(),
        details=details.copy(),
        messages=messages.copy(),
    )


def _check_templates(details: dict[str, str]) -> None:
    """Format every detail template once so bad placeholders fail at load time."""
    for key, template in details.items():
        try:
            template.format(**DETAIL_FIELDS[key])
        except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
            raise validate.ValidationError(
                "catalog", f"Bad template {template!r}: {e}", f"details.{key}"
            ) from None


def apply_overrides(base: Catalog, data: dict) -> Catalog:
    """Layer a validated override mapping on top of a catalog."""
    validate.validate(data, "catalog")
    details = {**base.details, **data.get("details", {})}
    _check_templates(details)
    return Catalog(
        locale=base.locale,
        labels={**base.labels, **data.get("labels", {})},
        details=details,
        messages={**base.messages, **data.get("messages", {})},
    )


def load_catalog(locale: str = DEFAULT_LOCALE, path: Optional[Path] = None) -> Catalog:
    """Build the catalog for a locale, applying a YAML override file if given.

    A `locale` key inside the file wins over the locale argument.

    Raises:
        FileNotFoundError: if path is given but doesn't exist
        ValidationError: if the file isn't a valid catalog document
    """
    if path is None:
        return builtin_catalog(locale)

    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise validate.ValidationError("catalog", f"Invalid YAML in {path}: {e}") from None

    if data is None:
        logger.debug(f"Catalog file {path} is empty, using built-in '{locale}'")
        return builtin_catalog(locale)

    validate.validate(data, "catalog", source=path)
    if data.get("locale"):
        locale = data["locale"]

    catalog = apply_overrides(builtin_catalog(locale), data)
    logger.debug(f"Loaded catalog overrides from {path} (locale={catalog.locale})")
    return catalog
