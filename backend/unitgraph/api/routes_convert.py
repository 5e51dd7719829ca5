"""Convert endpoint — resolves a factor through the conversion graph and applies it."""

from fastapi import APIRouter, HTTPException

from unitgraph.api.deps import context
from unitgraph.core.errors import DomainError, FormatError
from unitgraph.models.schemas import ConvertRequest, ConvertResponse

router = APIRouter(tags=["convert"])


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest):
    """Convert a value between two units of the same dimension."""
    try:
        conversion = context.get_conversion(req.src, req.dest)
    except (FormatError, DomainError) as e:
        raise HTTPException(status_code=422, detail=[{"message": str(e)}])

    if conversion is None:
        raise HTTPException(
            status_code=404,
            detail=[{"message": f"No conversion path found between '{req.src}' and '{req.dest}'."}],
        )

    return ConvertResponse(
        value=req.value * conversion.value,
        src=conversion.src,
        dest=conversion.dest,
        factor=conversion.value,
        relative_error=conversion.relative_error,
        dimension=conversion.dimension,
    )
