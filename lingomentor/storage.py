"""
Object storage for uploaded voice files (Supabase Storage REST API).

Used endpoints:
- POST   /storage/v1/object/{bucket}/{name}         upload
- DELETE /storage/v1/object/{bucket}/{name}         remove
- GET    /storage/v1/object/public/{bucket}/{name}  public URL (not called)
"""

from __future__ import annotations

import re
import time
from urllib.parse import quote

import httpx

from .config import settings
from .errors import UpstreamError

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class StorageError(UpstreamError):
    def __init__(self, details: str):
        super().__init__("Upload failed", details=details)


def object_name(filename: str | None, now_ms: int | None = None) -> str:
    """`<epoch-ms>-<sanitised name>`, e.g. `1718000000000-voice_note.webm`."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    safe = _UNSAFE_CHARS.sub("_", (filename or "").strip()).strip("._") or "recording"
    return f"{stamp}-{safe}"


class SupabaseStorage:
    def __init__(
        self,
        *,
        base_url: str,
        service_key: str,
        bucket: str,
        client: httpx.Client | None = None,
    ):
        self.base_url = (base_url or "").strip().rstrip("/")
        self.service_key = (service_key or "").strip()
        self.bucket = bucket
        self._client = client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
        }

    def _object_path(self, name: str) -> str:
        return f"/storage/v1/object/{quote(self.bucket)}/{quote(name)}"

    def _request(self, method: str, path: str, extra_headers: dict | None = None, **kwargs) -> httpx.Response:
        if not self.base_url:
            raise StorageError("SUPABASE_URL is not set.")
        if not self.service_key:
            raise StorageError("SUPABASE_SERVICE_KEY is not set.")

        url = self.base_url + path
        headers = {**self._headers(), **(extra_headers or {})}
        try:
            if self._client is not None:
                return self._client.request(method, url, headers=headers, **kwargs)
            with httpx.Client(timeout=settings.HTTP_TIMEOUT_S) as client:
                return client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise StorageError(f"Storage unreachable: {exc}") from exc

    def upload(self, name: str, data: bytes, content_type: str | None = None) -> str:
        resp = self._request(
            "POST",
            self._object_path(name),
            extra_headers={
                "Content-Type": content_type or "application/octet-stream",
                "x-upsert": "false",
            },
            content=data,
        )
        if resp.status_code not in (200, 201):
            raise StorageError(f"Storage upload failed: {resp.status_code} {resp.text[:500]}")
        return self.public_url(name)

    def delete(self, name: str) -> None:
        resp = self._request("DELETE", self._object_path(name))
        if resp.status_code not in (200, 204):
            raise StorageError(f"Storage delete failed: {resp.status_code} {resp.text[:500]}")

    def public_url(self, name: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{name}"


def get_storage() -> SupabaseStorage:
    """FastAPI dependency; tests override it with a fake."""
    return SupabaseStorage(
        base_url=settings.SUPABASE_URL,
        service_key=settings.SUPABASE_SERVICE_KEY,
        bucket=settings.VOICE_BUCKET,
    )
