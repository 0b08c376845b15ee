from typing import Literal, Tuple, get_args, cast

from .utils.errors import Err, GeneratorError

# Naming strategies accepted for generated runner classes
NamingScheme = Literal["simple", "feature-title"]

# Runner templates shipped with the package
TemplateId = Literal["junit", "testng"]

NAMING_SCHEMES: Tuple[NamingScheme, ...] = cast(Tuple[NamingScheme, ...], get_args(NamingScheme))
TEMPLATE_IDS: Tuple[TemplateId, ...] = cast(Tuple[TemplateId, ...], get_args(TemplateId))


def resolve_naming_scheme(value: str) -> NamingScheme:
    scheme = str(value or "").strip()
    if scheme not in NAMING_SCHEMES:
        raise GeneratorError(
            Err.INVALID_CONFIG,
            ctx={
                "field": "naming_scheme",
                "value": value,
                "accepted": list(NAMING_SCHEMES),
            },
        )
    return cast(NamingScheme, scheme)


__all__ = [
    "NamingScheme",
    "TemplateId",
    "NAMING_SCHEMES",
    "TEMPLATE_IDS",
    "resolve_naming_scheme",
]
