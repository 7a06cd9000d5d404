# provider_client.py (demo -> localhostprovider over REST)
import logging
from dataclasses import dataclass
from typing import Optional

import requests

log = logging.getLogger(__name__)

RECEIVER_PATH = "/myfeignreceiver"


class ProviderCallError(Exception):
    def __init__(self, url, status_code=None, cause=None):
        self.url = url
        self.status_code = status_code
        self.cause = cause
        if status_code is not None:
            msg = f"localhostprovider answered {status_code} for {url}"
        else:
            msg = f"localhostprovider unreachable at {url}: {cause}"
        super().__init__(msg)


@dataclass
class ProviderResult:
    """
    Outcome of one call to the provider. body holds the raw response bytes.

    A 2xx answer sets the body with error left as None. A non-2xx answer sets
    the body and the error together. A transport failure sets only the error.
    """
    url: str
    status_code: Optional[int] = None
    body: Optional[bytes] = None
    content_type: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes:
        if self.error is not None:
            raise ProviderCallError(self.url, self.status_code, self.error) from self.error
        return self.body


def receiver_url(base_url: str) -> str:
    return base_url.rstrip("/") + RECEIVER_PATH


def fetch_my_value(base_url: str, my_value: str, session=None) -> ProviderResult:
    """
    GET {base_url}/myfeignreceiver?myValue=... and wait for the full response.
    No retry and no timeout: whatever requests does by default applies.
    """
    url = receiver_url(base_url)
    http = session or requests
    try:
        resp = http.get(url, params={"myValue": my_value})
        resp.raise_for_status()
    except requests.HTTPError as e:
        return ProviderResult(url=url, status_code=e.response.status_code,
                              body=e.response.content,
                              content_type=e.response.headers.get("Content-Type"),
                              error=e)
    except requests.RequestException as e:
        return ProviderResult(url=url, error=e)
    return ProviderResult(url=url, status_code=resp.status_code, body=resp.content,
                          content_type=resp.headers.get("Content-Type"))


class ProviderClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.session = session

    def get_my_value(self, my_value: str) -> ProviderResult:
        """Successful result of the call; raises ProviderCallError otherwise."""
        log.debug("calling %s with myValue=%r", receiver_url(self.base_url), my_value)
        result = fetch_my_value(self.base_url, my_value, session=self.session)
        if not result.ok:
            log.warning("provider call failed: %s", result.error)
        result.unwrap()
        return result
