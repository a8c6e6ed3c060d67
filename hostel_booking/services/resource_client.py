import requests

from hostel_booking.exceptions import NetworkError


class ResourceClient:
    """
    Thin accessor for the generic REST resource store.
    Every collection is addressed as ``<base_url>/<collection>[/<id>]``.
    """

    def __init__(self, base_url, session=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method, path, payload=None):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise NetworkError(method, path, status=status) from e
        except requests.RequestException as e:
            raise NetworkError(method, path, reason=str(e)) from e
        return response

    def _json(self, method, path, response):
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(method, path, reason="invalid JSON body") from e

    def fetch_all(self, collection):
        path = f"/{collection}"
        data = self._json('GET', path, self._request('GET', path))
        if not isinstance(data, list):
            raise NetworkError('GET', path, reason="expected a list of records")
        return data

    def create(self, collection, record):
        """POST a record without id; the store assigns one."""
        path = f"/{collection}"
        return self._json('POST', path, self._request('POST', path, record))

    def replace(self, collection, record_id, record):
        """Full replace (PUT), every field is resent."""
        path = f"/{collection}/{record_id}"
        return self._json('PUT', path, self._request('PUT', path, record))

    def remove(self, collection, record_id):
        self._request('DELETE', f"/{collection}/{record_id}")
