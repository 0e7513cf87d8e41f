from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.routers.fields import request_fields
from app.types import GroupJidRequest, RequestFields
from app.utils.request_fields import require_group_jid, require_query_param, validate_fields

router = APIRouter(prefix="/group", tags=["group"])


@router.api_route("/participants/{instanceName}", methods=["GET", "POST"])
async def participants(fields: RequestFields = Depends(request_fields)) -> Dict[str, Any]:
    group = validate_fields({"groupJid": require_group_jid(fields)}, GroupJidRequest)
    return {"groupJid": group.group_jid, "participants": []}


@router.get("/inviteInfo/{instanceName}")
async def invite_info(fields: RequestFields = Depends(request_fields)) -> Dict[str, Any]:
    return {"inviteCode": require_query_param(fields, "inviteCode")}


@router.get("/fetchAllGroups/{instanceName}")
async def fetch_all_groups(fields: RequestFields = Depends(request_fields)) -> Dict[str, Any]:
    flag = require_query_param(
        fields,
        "getParticipants",
        'The "getParticipants" query parameter is required (true or false).',
    )
    return {"getParticipants": str(flag).lower() == "true", "groups": []}
