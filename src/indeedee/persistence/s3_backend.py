"""S3 export source implementing IFileStore."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from indeedee.core.exceptions import ExportSourceError
from indeedee.persistence.decoding import decode_export, is_export_key


class S3FileStore:
    """IFileStore over a bucket where payroll exports are dropped by month prefix."""

    def __init__(self, bucket: str, region: str = "ap-northeast-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def _location(self, key: str) -> str:
        return f"s3://{self._bucket}/{key}"

    def read(self, path: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=path)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in ("NoSuchKey", "404"):
                raise ExportSourceError(f"Export not found: {self._location(path)}") from exc
            raise ExportSourceError(f"Cannot read export {self._location(path)}: {code or exc}") from exc
        return resp["Body"].read()

    def read_text(self, path: str) -> str:
        """Read and decode one export."""
        return decode_export(self.read(path))

    def list_files(self, prefix: str) -> list[str]:
        """Export keys under ``prefix`` in key order; folder markers and other files are skipped."""
        keys: list[str] = []
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                keys.extend(obj["Key"] for obj in page.get("Contents", []) if is_export_key(obj["Key"]))
        except ClientError as exc:
            raise ExportSourceError(f"Cannot list exports under {self._location(prefix)}: {exc}") from exc
        return sorted(keys)
