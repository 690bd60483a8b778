"""Translation file formats: json, po (gettext), xlf (XLIFF 1.2) and csv.

Every format maps to and from a ``Dict[str, TranslationValue]``.
"""

import csv
import io
import json
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from babel.core import UnknownLocaleError
from babel.messages.catalog import Catalog
from babel.messages.pofile import read_po, write_po

from localization.i18n.exceptions import UnsupportedFormatError
from localization.i18n.models import Gender, PluralCategory, TranslationValue
from localization.logging import get_module_logger

logger = get_module_logger()

Translations = Dict[str, TranslationValue]

SUPPORTED_FORMATS = ("json", "po", "xlf", "csv")
PROJECT_NAME = "Localization Engine"
XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"
XLIFF_SOURCE_LANGUAGE = "fr"
CSV_COLUMNS = ("key", "value", "context", "gender", "plural", "variables")
CONTEXT_NOTE_PREFIX = "Context: "


def _enum_or_none(enum_cls, raw: Optional[str], key: str):
    if not raw:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning("translation_field_ignored", key=key, field=enum_cls.__name__, value=raw)
        return None


def value_to_dict(value: TranslationValue) -> Dict[str, Any]:
    data: Dict[str, Any] = {"value": value.value}
    if value.context:
        data["context"] = value.context
    if value.gender:
        data["gender"] = value.gender.value
    if value.plural_category:
        data["plural"] = value.plural_category.value
    if value.variables:
        data["variables"] = value.variables
    return data


def value_from_dict(key: str, data: Any) -> TranslationValue:
    """Build a value from a plain string or a {value, context, ...} dict."""
    if isinstance(data, str):
        return TranslationValue(key=key, value=data)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid translation entry for {key}")

    variables = data.get("variables") or {}
    return TranslationValue(
        key=key,
        value=str(data.get("value") or ""),
        context=data.get("context") or None,
        gender=_enum_or_none(Gender, data.get("gender"), key),
        plural_category=_enum_or_none(PluralCategory, data.get("plural"), key),
        variables=variables if isinstance(variables, dict) else {},
    )


def check_format(fmt: str) -> str:
    """Normalize a format name.

    Raises:
        UnsupportedFormatError: If the format is not one of SUPPORTED_FORMATS.
    """
    normalized = (fmt or "").lower()
    if normalized not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(fmt)
    return normalized


def export_json(
    translations: Translations, language: str, market: str, author: str = "System"
) -> str:
    now = datetime.now(timezone.utc).isoformat()
    document = {
        "language": language,
        "market": market,
        "version": "1.0.0",
        "format": "json",
        "translations": {key: value_to_dict(value) for key, value in translations.items()},
        "metadata": {
            "createdAt": now,
            "updatedAt": now,
            "author": author,
            "description": f"{language} translations for market {market}",
            "encoding": "utf-8",
        },
    }
    return json.dumps(document, ensure_ascii=False, indent=2)


def parse_json(content: str) -> Translations:
    """Accept a full export document or a bare key -> entry object."""
    parsed = json.loads(content)
    if isinstance(parsed, dict) and isinstance(parsed.get("translations"), dict):
        parsed = parsed["translations"]
    if not isinstance(parsed, dict):
        raise ValueError("Invalid JSON translation file")
    return {key: value_from_dict(key, entry) for key, entry in parsed.items()}


def export_po(translations: Translations, language: str, market: str) -> str:
    try:
        catalog = Catalog(locale=language, project=PROJECT_NAME, charset="utf-8")
    except UnknownLocaleError:
        catalog = Catalog(project=PROJECT_NAME, charset="utf-8")
    catalog.header_comment = f"# {PROJECT_NAME} translations\n# Language: {language}\n# Market: {market}"

    for key, value in translations.items():
        comments = [f"{CONTEXT_NOTE_PREFIX}{value.context}"] if value.context else []
        catalog.add(key, value.value, auto_comments=comments)

    buffer = io.BytesIO()
    write_po(buffer, catalog, omit_header=False)
    return buffer.getvalue().decode("utf-8")


def parse_po(content: str) -> Translations:
    catalog = read_po(io.BytesIO(content.encode("utf-8")))
    translations: Translations = {}
    for message in catalog:
        if not message.id or not isinstance(message.id, str) or not message.string:
            continue
        context = None
        for comment in message.auto_comments:
            if comment.startswith(CONTEXT_NOTE_PREFIX):
                context = comment[len(CONTEXT_NOTE_PREFIX):]
        translations[message.id] = TranslationValue(
            key=message.id, value=message.string, context=context
        )
    return translations


def export_xlf(translations: Translations, language: str) -> str:
    root = ET.Element("xliff", {"version": "1.2", "xmlns": XLIFF_NAMESPACE})
    file_element = ET.SubElement(
        root,
        "file",
        {
            "source-language": XLIFF_SOURCE_LANGUAGE,
            "target-language": language,
            "datatype": "plaintext",
            "original": PROJECT_NAME,
        },
    )
    body = ET.SubElement(file_element, "body")
    for key, value in translations.items():
        unit = ET.SubElement(body, "trans-unit", {"id": key, "resname": key})
        ET.SubElement(unit, "source").text = key
        ET.SubElement(unit, "target").text = value.value
        if value.context:
            ET.SubElement(unit, "note").text = f"{CONTEXT_NOTE_PREFIX}{value.context}"

    ET.indent(root)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_xlf(content: str) -> Translations:
    root = ET.fromstring(content)
    translations: Translations = {}
    for unit in root.iter():
        if _local_name(unit.tag) != "trans-unit":
            continue
        key = unit.get("id")
        if not key:
            continue
        target = None
        context = None
        for child in unit:
            name = _local_name(child.tag)
            if name == "target":
                target = child.text or ""
            elif name == "note" and (child.text or "").startswith(CONTEXT_NOTE_PREFIX):
                context = child.text[len(CONTEXT_NOTE_PREFIX):]
        if target is not None:
            translations[key] = TranslationValue(key=key, value=target, context=context)
    return translations


def export_csv(translations: Translations) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for key, value in translations.items():
        writer.writerow(
            [
                key,
                value.value,
                value.context or "",
                value.gender.value if value.gender else "",
                value.plural_category.value if value.plural_category else "",
                json.dumps(value.variables, ensure_ascii=False) if value.variables else "",
            ]
        )
    return buffer.getvalue()


def parse_csv(content: str) -> Translations:
    """Rows need at least key and value; malformed variables JSON is ignored."""
    translations: Translations = {}
    reader = csv.reader(io.StringIO(content))
    next(reader, None)
    for row in reader:
        if len(row) < 2 or not row[0].strip():
            continue
        key, value = row[0].strip(), row[1]
        context, gender, plural, variables_raw = (row[2:6] + [""] * 4)[:4]

        variables: Dict[str, Any] = {}
        if variables_raw:
            try:
                decoded = json.loads(variables_raw)
            except ValueError:
                logger.warning("translation_variables_invalid", key=key)
            else:
                variables = decoded if isinstance(decoded, dict) else {}

        translations[key] = TranslationValue(
            key=key,
            value=value,
            context=context or None,
            gender=_enum_or_none(Gender, gender, key),
            plural_category=_enum_or_none(PluralCategory, plural, key),
            variables=variables,
        )
    return translations


def export_translations(
    translations: Translations, fmt: str, language: str, market: str, author: str = "System"
) -> str:
    """Serialize translations.

    Raises:
        UnsupportedFormatError: For formats other than json, po, xlf and csv.
    """
    fmt = check_format(fmt)
    if fmt == "json":
        return export_json(translations, language, market, author)
    if fmt == "po":
        return export_po(translations, language, market)
    if fmt == "xlf":
        return export_xlf(translations, language)
    return export_csv(translations)


def parse_translations(content: str, fmt: str) -> Translations:
    """Parse file content.

    Raises:
        UnsupportedFormatError: For unknown formats.
        ValueError: If the content is malformed for its format.
    """
    fmt = check_format(fmt)
    if fmt == "json":
        return parse_json(content)
    if fmt == "po":
        return parse_po(content)
    if fmt == "xlf":
        try:
            return parse_xlf(content)
        except ET.ParseError as e:
            raise ValueError(f"Invalid XLIFF document: {e}") from e
    return parse_csv(content)
