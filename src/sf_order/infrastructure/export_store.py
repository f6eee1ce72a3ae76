"""S3ExportStore — writes the order export as one object.

`bucket` may be a bucket name or an S3 access point ARN; boto3 accepts both
as Bucket.
"""

import asyncio
from typing import Any


class S3ExportStore:
    def __init__(self, client: Any, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    async def put_object(self, key: str, body: bytes) -> None:
        await asyncio.to_thread(
            self._client.put_object,
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType="application/json",
        )
