from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.routers.fields import request_fields
from app.types import InstanceRequest, RequestFields
from app.utils.jid import create_jid
from app.utils.request_fields import (
    CREATE_PRECEDENCE,
    DELETE_PRECEDENCE,
    resolve_and_validate,
    resolve_instance_name,
)

logger = logging.getLogger("wagw.routers.instance")

router = APIRouter(prefix="/instance", tags=["instance"])


@router.post("/create", status_code=201)
async def create_instance(fields: RequestFields = Depends(request_fields)) -> Dict[str, Any]:
    """Validate an instance definition; the body wins over query and path."""
    data = resolve_and_validate(fields, InstanceRequest, CREATE_PRECEDENCE)
    logger.info("instance %s accepted", data.instance_name)
    return {
        "ok": True,
        "instance": {
            "instanceName": data.instance_name,
            "owner": create_jid(data.number) if data.number else None,
            "qrcode": bool(data.qrcode),
            "status": "created",
        },
    }


@router.delete("/delete")
async def delete_instance(fields: RequestFields = Depends(request_fields)) -> Dict[str, Any]:
    """Resolve the instance to delete; the query string wins over the body."""
    data = resolve_and_validate(fields, InstanceRequest, DELETE_PRECEDENCE)
    logger.info(
        "instance %s scheduled for deletion",
        resolve_instance_name(fields, DELETE_PRECEDENCE) or data.instance_name,
    )
    return {"ok": True, "instance": {"instanceName": data.instance_name, "status": "deleted"}}
