"""Pluggable export sources behind the IFileStore Protocol."""

from __future__ import annotations

from indeedee.core.config import AppSettings
from indeedee.core.protocols import IFileStore
from indeedee.persistence.decoding import decode_export
from indeedee.persistence.local_backend import LocalFileStore
from indeedee.persistence.s3_backend import S3FileStore

S3_SCHEME = "s3://"


def split_location(location: str) -> tuple[str | None, str]:
    """Split ``s3://bucket/key`` into (bucket, key); local paths give (None, path)."""
    if not location.startswith(S3_SCHEME):
        return None, location
    bucket, _, key = location[len(S3_SCHEME):].partition("/")
    return bucket, key


def create_file_store(location: str, settings: AppSettings | None = None) -> tuple[IFileStore, str]:
    """Pick the export source for ``location``.

    Returns:
        Tuple of (file_store, path within that store).
    """
    if settings is None:
        settings = AppSettings()

    bucket, path = split_location(location)
    if bucket is None:
        return LocalFileStore(), path

    store = S3FileStore(
        bucket=bucket or settings.s3.bucket,
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
    )
    return store, path


def read_export(location: str, settings: AppSettings | None = None) -> str:
    """Read and decode the export at a local path or ``s3://`` location."""
    store, path = create_file_store(location, settings)
    return decode_export(store.read(path))
