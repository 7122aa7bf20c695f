"""CSS ``@font-face`` rules for catalog families."""

import logging

from .models import FamilyRecord, VariantRecord

logger = logging.getLogger(__name__)

FONT_FACE_TEMPLATE = """@font-face {{
    font-family: "{family}";
    src: url("{url}") format("{format}");
    font-weight: {weight};
    font-style: {style};
    font-display: swap;
}}"""


def variant_url(variant: VariantRecord, base_url: str = "") -> str:
    if variant.is_embedded or not base_url:
        return variant.file
    return f"{base_url.rstrip('/')}/{variant.file}"


def font_face_rules(family: FamilyRecord, base_url: str = "") -> list[str]:
    """
    Build one ``@font-face`` rule per distinct weight/style of a family.

    Args:
        family: Family to render
        base_url: Prefix for relative font paths; data URIs are used as-is

    Returns:
        CSS rules in variant order
    """
    rules = []
    seen: set[tuple[int, str]] = set()

    for variant in family.variants:
        face_key = (variant.weight, variant.style.value)
        if face_key in seen:
            logger.debug(
                f"Skipping duplicate face {family.family_name}-{variant.weight}-{variant.style.value}"
            )
            continue
        seen.add(face_key)

        rules.append(
            FONT_FACE_TEMPLATE.format(
                family=family.family_name.replace('"', '\\"'),
                url=variant_url(variant, base_url),
                format=variant.format.css_format,
                weight=variant.weight,
                style=variant.style.value,
            )
        )

    return rules


def font_face_css(family: FamilyRecord, base_url: str = "") -> str:
    return "\n\n".join(font_face_rules(family, base_url)) + "\n"
