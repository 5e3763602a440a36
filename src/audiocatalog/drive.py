"""Google Drive adapters: OAuth credentials and folder listing."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .errors import CredentialFailure, ListingFailure
from .schema import RemoteEntry
from .utils.logging import get_logger

LOGGER = get_logger(__name__)

DRIVE_SCOPES = ("https://www.googleapis.com/auth/drive.metadata.readonly",)
LIST_FIELDS = "nextPageToken, files(id, name, mimeType)"

FlowRunner = Callable[[InstalledAppFlow], Credentials]


def _run_local_server(flow: InstalledAppFlow) -> Credentials:
    return flow.run_local_server(port=0, prompt="consent", access_type="offline")


def load_credentials(
    credentials_path: Path,
    token_path: Path,
    scopes: Sequence[str] = DRIVE_SCOPES,
    flow_runner: Optional[FlowRunner] = None,
) -> Credentials:
    """Return authorised user credentials, refreshing or re-authorising as needed.

    A cached token at ``token_path`` is reused while valid and refreshed when
    it has expired. Without a usable token the installed-app flow is run
    against the client secrets in ``credentials_path``. Whatever credentials
    result are written back to ``token_path``.
    """

    creds: Optional[Credentials] = None
    if token_path.exists():
        try:
            creds = Credentials.from_authorized_user_file(str(token_path), list(scopes))
        except ValueError as exc:
            LOGGER.warning("Ignoring unreadable token file %s: %s", token_path, exc)

    if creds is not None and creds.valid:
        return creds

    try:
        if creds is not None and creds.expired and creds.refresh_token:
            LOGGER.info("Refreshing expired Drive token")
            creds.refresh(Request())
        else:
            if not credentials_path.exists():
                raise CredentialFailure(f"Client secrets file {credentials_path} not found")
            LOGGER.info("Starting OAuth flow with client secrets %s", credentials_path)
            flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), list(scopes))
            creds = (flow_runner or _run_local_server)(flow)
    except (GoogleAuthError, ValueError) as exc:
        raise CredentialFailure(f"Unable to obtain Drive credentials: {exc}") from exc

    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_path.write_text(creds.to_json(), encoding="utf-8")
    return creds


def build_drive_service(credentials: Credentials) -> Any:
    """Build a Drive v3 client for ``credentials``."""

    return build("drive", "v3", credentials=credentials, cache_discovery=False)


class DriveLister:
    """List folder children through the Drive ``files.list`` endpoint.

    A single page of up to ``page_size`` entries is requested per folder.
    """

    def __init__(self, service: Any, page_size: int = 1000, order_by: str = "name asc") -> None:
        self.service = service
        self.page_size = page_size
        self.order_by = order_by

    def list_children(self, folder_id: str) -> List[RemoteEntry]:
        request = self.service.files().list(
            q=f"'{folder_id}' in parents",
            pageSize=self.page_size,
            orderBy=self.order_by,
            fields=LIST_FIELDS,
        )
        try:
            response = request.execute()
        except (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError) as exc:
            raise ListingFailure(folder_id, exc) from exc
        if response.get("nextPageToken"):
            LOGGER.warning("Listing of %s truncated at %d entries", folder_id, self.page_size)
        return [RemoteEntry.model_validate(item) for item in response.get("files", [])]
