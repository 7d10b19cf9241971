"""FastAPI routes exposing merged translation dictionaries."""

from typing import List

from fastapi import APIRouter, HTTPException, Query

from infrastructure.i18n.models import LoadNamespacesOptions, Locale, MergedDictionary
from infrastructure.logging import get_module_logger
from infrastructure.services import NamespaceServiceDep, SettingsDep

logger = get_module_logger()
router = APIRouter(prefix="/i18n", tags=["i18n"])


@router.get(
    "/{locale}",
    summary="Get merged translations",
    description="Load, merge and cache the requested namespaces for a locale",
)
async def get_translations(
    locale: str,
    service: NamespaceServiceDep,
    settings: SettingsDep,
    namespace: List[str] = Query(
        default=["common"],
        description="Namespaces to load, lowest priority first",
        examples=[["common", "navigation"]],
    ),
) -> MergedDictionary:
    """Return the merged dictionary for a locale.

    The locale must be known and listed in I18N_SUPPORTED_LOCALES.

    Raises:
        HTTPException: 404 for an unsupported locale
    """
    try:
        resolved = Locale.from_string(locale)
    except ValueError as e:
        logger.warning("unsupported_locale_requested", locale=locale)
        raise HTTPException(status_code=404, detail=str(e)) from e

    if not settings.i18n.is_supported(resolved.value):
        logger.warning("disabled_locale_requested", locale=resolved.value)
        raise HTTPException(status_code=404, detail=f"Unsupported locale: {locale}")

    return await service.get_or_load(
        resolved, namespace, LoadNamespacesOptions(log_missing=True)
    )
