from adapters.adwords.client import AdWordsClient
from adapters.adwords.campaigns import CampaignService
from adapters.adwords.campaign_extension_settings import CampaignExtensionSettingService

__all__ = ["AdWordsClient", "CampaignService", "CampaignExtensionSettingService"]
