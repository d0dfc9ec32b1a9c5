"""
Liveness and version endpoints.

Served outside the ``/api`` prefix so load balancers and deployment probes
can reach them without knowing the API layout.
"""

from fastapi import APIRouter

from profilehub.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report that the ProfileHub server is up.",
    response_description="Liveness status.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Report the server release and the schema revision it expects.",
    response_description="Release and schema identifiers.",
)
async def version():
    return {"version": constant.API_VERSION, "schema_version": constant.SCHEMA_VERSION}
