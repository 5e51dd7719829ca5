"""Parse endpoints — unit symbols and dimension codes, without converting anything."""

from fastapi import APIRouter, HTTPException

from unitgraph.api.deps import context
from unitgraph.core import dimensions
from unitgraph.core.errors import DomainError, FormatError
from unitgraph.models.schemas import (
    DimensionRequest,
    DimensionResponse,
    ExpandRequest,
    ExpandResponse,
    UnitRequest,
    UnitResponse,
    UnitTermResponse,
)

router = APIRouter(tags=["parse"])


def _quantity_type_name(dimension: str) -> str | None:
    quantity_type = context.quantity_types.get_by_dimension(dimension)
    return quantity_type.name if quantity_type else None


@router.post("/units/parse", response_model=UnitResponse)
async def parse_unit(req: UnitRequest):
    """Parse a compound unit symbol into its canonical form and terms."""
    try:
        unit = context.parse_unit(req.symbol)
    except FormatError as e:
        raise HTTPException(
            status_code=422,
            detail=[{"message": str(e), "position": e.position}],
        )
    except DomainError as e:
        raise HTTPException(status_code=422, detail=[{"message": str(e)}])

    return UnitResponse(
        ascii_symbol=unit.ascii_symbol,
        unicode_symbol=unit.unicode_symbol,
        dimension=unit.dimension,
        quantity_type=_quantity_type_name(unit.dimension),
        terms=[
            UnitTermResponse(
                symbol=term.ascii_symbol,
                unit=term.unit.name,
                prefix=term.prefix.name if term.prefix else None,
                exponent=term.exponent,
                dimension=term.dimension,
            )
            for term in unit
        ],
    )


@router.post("/units/expand", response_model=ExpandResponse)
async def expand_unit(req: ExpandRequest):
    """Expand named derived units (N, J, Pa, ...) into base units, scaling the value."""
    try:
        value, unit = context.expand(req.value, req.symbol)
    except (FormatError, DomainError) as e:
        raise HTTPException(status_code=422, detail=[{"message": str(e)}])

    return ExpandResponse(
        value=value,
        ascii_symbol=unit.ascii_symbol,
        unicode_symbol=unit.unicode_symbol,
        dimension=unit.dimension,
    )


@router.post("/dimensions/normalize", response_model=DimensionResponse)
async def normalize_dimension(req: DimensionRequest):
    """Normalize a dimension code and name its axes."""
    try:
        code = dimensions.normalize(req.code)
    except DomainError as e:
        raise HTTPException(status_code=422, detail=[{"message": str(e)}])

    try:
        si_unit = context.si_unit(code).ascii_symbol
    except DomainError as e:
        raise HTTPException(status_code=422, detail=[{"message": str(e)}])

    axes = dimensions.decompose(code)
    return DimensionResponse(
        code=code,
        axes=axes,
        names={letter: dimensions.axis_name(letter) for letter in axes},
        si_unit=si_unit,
        quantity_type=_quantity_type_name(code),
    )
