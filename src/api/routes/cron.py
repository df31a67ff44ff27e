"""Refresh Trigger Routes.

Full refreshes run out of process: this endpoint only asks GitHub Actions
to start the aggregation workflow.
"""

import logging
from datetime import datetime
from typing import Optional

import pytz
import requests
from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse

from src.api.models import DispatchResponse
from src.shared.config import Config

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cron", tags=["Cron"])

GITHUB_API_URL = "https://api.github.com"


def dispatch_workflow(timeout: Optional[float] = None) -> requests.Response:
    """POST a workflow_dispatch event for the aggregation workflow."""
    url = (
        f"{GITHUB_API_URL}/repos/{Config.GITHUB_REPO_OWNER}/{Config.GITHUB_REPO_NAME}"
        f"/actions/workflows/{Config.GITHUB_WORKFLOW}/dispatches"
    )
    return requests.post(
        url,
        headers={
            "Authorization": f"Bearer {Config.GITHUB_TOKEN}",
            "Accept": "application/vnd.github.v3+json",
        },
        json={"ref": Config.GITHUB_REF, "inputs": {"mode": "full"}},
        timeout=timeout or Config.FETCH_TIMEOUT,
    )


def _dump(model: DispatchResponse) -> dict:
    return model.model_dump(by_alias=True, exclude_none=True)


@router.get("/full-scrape", response_model=DispatchResponse, response_model_exclude_none=True)
def full_scrape(authorization: Optional[str] = Header(default=None)):
    """Trigger a full calendar rebuild."""
    if Config.CRON_SECRET and authorization != f"Bearer {Config.CRON_SECRET}":
        logger.warning("Rejected full-scrape trigger with bad credentials")
        return JSONResponse(status_code=401, content={"error": "Unauthorized"})

    if not Config.dispatch_configured():
        return DispatchResponse(
            success=False,
            message="GitHub configuration not set. Full refreshes run on the workflow schedule.",
        )

    try:
        response = dispatch_workflow()
    except requests.RequestException as e:
        logger.error("Workflow dispatch failed: %s", e)
        return JSONResponse(
            status_code=500,
            content=_dump(
                DispatchResponse(
                    success=False, message="Error triggering workflow", error=str(e)
                )
            ),
        )

    if not response.ok:
        logger.error("Workflow dispatch rejected: HTTP %s", response.status_code)
        return JSONResponse(
            status_code=500,
            content=_dump(
                DispatchResponse(
                    success=False,
                    message="Failed to trigger GitHub Actions",
                    error=response.text,
                )
            ),
        )

    logger.info("Full refresh dispatched to %s", Config.GITHUB_WORKFLOW)
    return DispatchResponse(
        success=True,
        message="Full refresh triggered via GitHub Actions",
        triggered_at=datetime.now(pytz.UTC).isoformat(),
    )
