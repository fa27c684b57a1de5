"""
REST API routes for the chess-club Web UI.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from club_platform.models import STATUS_INVALID, SubmissionResult
from club_platform.navigation import NavigationError
from club_platform.persistence import RecordStoreError
from club_platform.schemas import RECORD_KINDS, UnknownRecordKindError
from .session_manager import NotLoggedInError, WebSessionManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# Single shared session manager (single-user local tool)
session_mgr = WebSessionManager()


# --- Request models ---

class RegisterRequest(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""
    elo_rating: str | int = ""


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class SubmitRequest(BaseModel):
    values: dict[str, str] = {}


# --- Helpers ---

def _submission_response(result: SubmissionResult) -> dict:
    """Map a submission result to a response, raising for failures."""
    if result.ok:
        return result.to_dict()
    status_code = 422 if result.status == STATUS_INVALID else 500
    raise HTTPException(status_code=status_code, detail=result.to_dict())


def _require_login() -> None:
    try:
        session_mgr.require_login()
    except NotLoggedInError as e:
        raise HTTPException(status_code=401, detail=str(e))


# --- Routes ---

@router.get("/kinds")
async def get_kinds():
    """Return the field schema of every record kind for the frontend."""
    return {"kinds": [kind.to_dict() for kind in RECORD_KINDS.values()]}


@router.get("/navigation")
async def get_navigation():
    """Return the current screen and the actions available on it."""
    return session_mgr.get_navigation()


@router.post("/navigation/{action}")
async def navigate(action: str):
    """Apply a navigation action (back, open a form, logout...)."""
    try:
        return session_mgr.navigate(action)
    except NavigationError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/register")
async def register(req: RegisterRequest):
    """Register an account and move on to the login screen."""
    result = session_mgr.register(req.username, req.email, req.password, req.elo_rating)
    response = _submission_response(result)
    return {**response, "navigation": session_mgr.get_navigation()}


@router.post("/login")
async def login(req: LoginRequest):
    """Check credentials and open the dashboard."""
    outcome = session_mgr.login(req.username, req.password)
    if not outcome.ok:
        raise HTTPException(status_code=401, detail=outcome.message)
    return {**outcome.to_dict(), "navigation": session_mgr.get_navigation()}


@router.post("/logout")
async def logout():
    """Forget the logged-in user and return to the login screen."""
    return session_mgr.logout()


@router.get("/dashboard")
async def get_dashboard():
    """Return the greeting and the forms available to the logged-in user."""
    _require_login()
    return session_mgr.get_dashboard()


@router.post("/records/{kind}")
async def create_record(kind: str, req: SubmitRequest):
    """Validate and append one dashboard form submission."""
    _require_login()
    try:
        result = session_mgr.submit(kind, req.values)
    except UnknownRecordKindError:
        raise HTTPException(status_code=404, detail=f"Unknown record kind: {kind}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _submission_response(result)


@router.get("/records/{kind}")
async def get_records(kind: str):
    """List saved records of a kind in append order."""
    _require_login()
    try:
        records = session_mgr.records(kind)
    except UnknownRecordKindError:
        raise HTTPException(status_code=404, detail=f"Unknown record kind: {kind}")
    except RecordStoreError as e:
        logger.error("Failed to read %s records: %s", kind, e, exc_info=e.cause)
        raise HTTPException(status_code=500, detail=str(e))
    return {"kind": kind, "records": records}
