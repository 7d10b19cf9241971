"""FastAPI routes for the tags package."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from infrastructure.i18n.models import DEFAULT_LOCALE, Locale
from infrastructure.logging import get_module_logger
from infrastructure.services import SettingsDep, TagAssignerDep, TagCatalogDep
from models.calculators import CalculatorSchema
from packages.tags.definitions import TagGroup
from packages.tags.schemas import (
    NormalizedTagsResponse,
    TagSummary,
    TagUsage,
    TagValidationResponse,
)
from packages.tags.usage import get_top_used_tags

logger = get_module_logger()
router = APIRouter(prefix="/tags", tags=["tags"])


def _resolve_locale(locale: str) -> Locale:
    try:
        return Locale.from_string(locale)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get(
    "",
    response_model=List[TagSummary],
    summary="List tags",
    description="Catalog tags with labels in the requested locale",
)
def list_tags(
    catalog: TagCatalogDep,
    locale: str = Query(DEFAULT_LOCALE.value, description="Label locale"),
    group: Optional[TagGroup] = Query(None, description="Restrict to one tag group"),
) -> List[TagSummary]:
    resolved = _resolve_locale(locale)
    definitions = catalog.get_by_group(group) if group else catalog.definitions
    return [
        TagSummary(id=d.id, label=d.label_for(resolved), group=d.group)
        for d in definitions
    ]


@router.post(
    "/normalize",
    response_model=NormalizedTagsResponse,
    summary="Normalize calculator tags",
    description="Validate declared tags and return the normalized tag set",
)
def normalize_calculator_tags(
    calculator: CalculatorSchema,
    assigner: TagAssignerDep,
) -> NormalizedTagsResponse:
    """Normalize the tags of a calculator definition.

    Args:
        calculator: Calculator definition (id, slug, category, tags)
        assigner: Injected tag assigner

    Returns:
        NormalizedTagsResponse with the tags and validation of declared tags
    """
    log = logger.bind(calculator_id=calculator.id, endpoint="/tags/normalize")
    validation = assigner.catalog.validate(calculator.tags or [])
    tags = assigner.normalize(calculator)
    log.info("calculator_tags_normalized", tags=tags, invalid=validation.invalid)
    return NormalizedTagsResponse(
        calculator_id=calculator.id,
        tags=tags,
        validation=TagValidationResponse(valid=validation.valid, invalid=validation.invalid),
    )


@router.post(
    "/top",
    response_model=List[TagUsage],
    summary="Most used tags",
    description="Rank the catalog tags declared by a set of calculators",
)
def top_used_tags(
    calculators: List[CalculatorSchema],
    catalog: TagCatalogDep,
    settings: SettingsDep,
    locale: str = Query(DEFAULT_LOCALE.value, description="Label locale"),
    limit: Optional[int] = Query(
        None, ge=1, description="Maximum tags returned (default: TAGS_TOP_LIMIT)"
    ),
    include_intent: bool = Query(False, description="Include intent tags"),
) -> List[TagUsage]:
    resolved = _resolve_locale(locale)
    return get_top_used_tags(
        calculators,
        locale=resolved,
        limit=limit or settings.tags.TOP_TAGS_LIMIT,
        include_intent=include_intent,
        catalog=catalog,
    )
