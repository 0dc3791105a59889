from typing import List, Tuple

from adapters.adwords.base_service import BaseAdWordsService
from core.models.common import Selector
from core.models.extension_setting import (
    CampaignExtensionSetting,
    CampaignExtensionSettingOperations,
)


class CampaignExtensionSettingService(BaseAdWordsService):
    """Manage extensions at the campaign level.

    The extensions are backed by feeds, feed items and campaign feeds that
    AdWords creates and updates on the account's behalf.

    Reference: https://developers.google.com/adwords/api/docs/reference/v201806/CampaignExtensionSettingService
    """

    SERVICE_NAME = "CampaignExtensionSettingService"
    SELECTOR_TAG = "selector"
    ENTRY_MODEL = CampaignExtensionSetting

    async def get(self, selector: Selector) -> Tuple[List[CampaignExtensionSetting], int]:
        return await self._get_page(selector)

    async def mutate(
        self, operations: CampaignExtensionSettingOperations
    ) -> List[CampaignExtensionSetting]:
        """Add, modify or remove campaign extension settings."""
        return await self._mutate("mutate", operations, CampaignExtensionSetting)

    async def query(self, query: str) -> Tuple[List[CampaignExtensionSetting], int]:
        return await self._query_page(query)
