from typing import List, Tuple

from adapters.adwords.base_service import BaseAdWordsService
from core.models.campaign import (
    Campaign,
    CampaignLabel,
    CampaignLabelOperations,
    CampaignOperations,
)
from core.models.common import Selector


class CampaignService(BaseAdWordsService):
    """Campaign CRUD against the AdWords CampaignService.

    Reference: https://developers.google.com/adwords/api/docs/reference/v201806/CampaignService
    """

    SERVICE_NAME = "CampaignService"
    SELECTOR_TAG = "serviceSelector"
    ENTRY_MODEL = Campaign

    async def get(self, selector: Selector) -> Tuple[List[Campaign], int]:
        """Return the campaigns matching the selector and the total match count.

        Selectable fields: Id, Name, Status, ServingStatus, StartDate, EndDate,
        AdServingOptimizationStatus, Settings, AdvertisingChannelType,
        AdvertisingChannelSubType, Labels, TrackingUrlTemplate,
        UrlCustomParameters.

        Filterable fields: Id, Name, Status, ServingStatus, StartDate, EndDate,
        AdvertisingChannelType, AdvertisingChannelSubType, Labels,
        TrackingUrlTemplate.
        """
        return await self._get_page(selector)

    async def mutate(self, operations: CampaignOperations) -> List[Campaign]:
        """Add or modify campaigns and return them as stored by the service.

        The service has no REMOVE for campaigns; SET ``status="REMOVED"``
        instead.

        Example:
            campaigns = await campaign_service.mutate({
                "ADD": [
                    Campaign(
                        name="my campaign name",
                        status="PAUSED",
                        budget_id=321543214,
                        settings=[new_real_time_bidding_setting(True)],
                        advertising_channel_type="SEARCH",
                        bidding_strategy_configuration=BiddingStrategyConfiguration(
                            strategy_type="MANUAL_CPC",
                        ),
                    ),
                ],
                "SET": [modified_campaign],
            })
        """
        return await self._mutate("mutate", operations, Campaign)

    async def mutate_label(self, operations: CampaignLabelOperations) -> List[CampaignLabel]:
        """Attach labels to (ADD) or detach them from (REMOVE) campaigns."""
        return await self._mutate("mutateLabel", operations, CampaignLabel)

    async def query(self, query: str) -> Tuple[List[Campaign], int]:
        """Run an AWQL query, e.g. ``SELECT Id, Name WHERE Status = 'ENABLED'``."""
        return await self._query_page(query)

    def _prepare_operand(self, operand):
        # Read-only fields the service rejects on mutate, so a campaign
        # returned by get() can be sent back as-is.
        if isinstance(operand, Campaign):
            return operand.model_copy(
                update={"campaign_trial_type": None, "ad_serving_optimization_status": None}
            )
        return operand
