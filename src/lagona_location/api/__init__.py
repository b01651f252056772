"""
API layer for the LAGONA data store.

Provides a REST client for reading and writing business hub locations.
"""

import logging
from typing import Optional

from .client import APIClient
from .business_hubs import BusinessHubsAPI


class LagonaStoreAPI(APIClient, BusinessHubsAPI):
    """
    Unified API client for the LAGONA data store.

    Combines the base REST client with business hub operations.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 30,
        max_retries: int = 3,
        schema: str = "public",
        logger: Optional[logging.Logger] = None
    ):
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries,
            schema=schema,
            logger=logger
        )


__all__ = [
    "APIClient",
    "BusinessHubsAPI",
    "LagonaStoreAPI",
]
