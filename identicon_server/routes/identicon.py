from typing import Optional

from fastapi import APIRouter, Query, Request, Response
from fastapi.concurrency import run_in_threadpool

from ..services.identicon import generate_identicon
from ..services.params import resolve_parameters

router = APIRouter(tags=["identicon"])

# Values stay raw strings; unparseable ones fall back to defaults instead of a 422
@router.get('/{path:path}')
async def identicon(
    request: Request,
    size: Optional[str] = Query(None),
    pad: Optional[str] = Query(None),
    res: Optional[str] = Query(None),
    sym: Optional[str] = Query(None),
):
    # The name is hashed as sent, percent escapes included
    raw_path = request.scope.get("raw_path") or request.url.path.encode()
    name, params = resolve_parameters(raw_path.decode("latin-1"), size=size, pad=pad, res=res, sym=sym)
    content = await run_in_threadpool(generate_identicon, name, params)
    return Response(content, media_type=params.media_type)
