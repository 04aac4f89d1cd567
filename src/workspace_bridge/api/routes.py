"""
HTTP routes for the authorization flow, mail and calendar.

Provides endpoints:
- GET /auth - Consent URL (or redirect to it)
- GET /oauth2callback - Authorization code exchange
- GET /getEmails - Recent messages, normalized
- POST /createEvent - Create a calendar event
- GET /listEvents - Upcoming calendar events
- GET /status - Whether the session is authorized
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse, RedirectResponse

from workspace_bridge.api.schemas import (
    AuthUrlResponse,
    CreateEventRequest,
    CreateEventResponse,
    StatusResponse,
)
from workspace_bridge.broker import Broker
from workspace_bridge.config import DetailLevel
from workspace_bridge.exceptions import AuthExchangeError, ProviderError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_broker(request: Request) -> Broker:
    return request.app.state.broker


# =============================================================================
# OAuth
# =============================================================================


@router.get("/auth", response_model=AuthUrlResponse)
async def auth(redirect: bool = False, broker: Broker = Depends(get_broker)):
    """Return the consent URL, or redirect the browser to it."""
    url = broker.authorization_url()
    if redirect:
        return RedirectResponse(url, status_code=307)
    return AuthUrlResponse(authUrl=url)


@router.get("/oauth2callback", response_class=PlainTextResponse)
def oauth2callback(
    code: str | None = None,
    error: str | None = None,
    broker: Broker = Depends(get_broker),
):
    """Exchange the authorization code. Runs in the threadpool (blocking I/O)."""
    if error:
        logger.warning(f"Provider returned OAuth error: {error}")
        return PlainTextResponse(f"OAuth failed: {error}", status_code=400)
    if not code:
        return PlainTextResponse("Missing authorization code", status_code=400)

    try:
        broker.auth.complete_authorization(code)
    except AuthExchangeError as e:
        logger.error(f"OAuth error: {e}")
        return PlainTextResponse("OAuth failed", status_code=500)

    return PlainTextResponse("Auth successful! Full Gmail and Calendar access granted.")


@router.get("/status", response_model=StatusResponse)
async def status(broker: Broker = Depends(get_broker)):
    return StatusResponse(authorized=broker.session.is_authorized())


# =============================================================================
# Mail
# =============================================================================


@router.get("/getEmails")
async def get_emails(
    q: str | None = None,
    max_results: int | None = Query(None, alias="maxResults", ge=1, le=500),
    detail_level: DetailLevel | None = Query(None, alias="format"),
    broker: Broker = Depends(get_broker),
):
    try:
        emails = await broker.mail.get_recent_emails(q, max_results, detail_level)
    except ProviderError as e:
        logger.error(f"Error fetching emails: {e}")
        return PlainTextResponse("Error retrieving emails", status_code=500)
    return [email.to_dict() for email in emails]


# =============================================================================
# Calendar
# =============================================================================


@router.post("/createEvent", response_model=CreateEventResponse)
async def create_event(body: CreateEventRequest, broker: Broker = Depends(get_broker)):
    try:
        event_id = await broker.calendar.create_event(body.summary, body.start, body.end)
    except ProviderError as e:
        logger.error(f"Error creating event: {e}")
        return PlainTextResponse("Error creating event", status_code=500)
    return CreateEventResponse(success=True, eventId=event_id)


@router.get("/listEvents")
async def list_events(
    max_results: int | None = Query(None, alias="maxResults", ge=1, le=2500),
    broker: Broker = Depends(get_broker),
):
    try:
        events = await broker.calendar.list_upcoming(max_results)
    except ProviderError as e:
        logger.error(f"Error listing events: {e}")
        return PlainTextResponse("Error retrieving calendar events", status_code=500)
    return [event.to_dict() for event in events]
