from core.models.bidding import (
    Bid,
    BiddingScheme,
    BiddingStrategyConfiguration,
    ManualCpcBiddingScheme,
    ManualCpmBiddingScheme,
    MaximizeConversionsBiddingScheme,
    TargetCpaBiddingScheme,
    TargetRoasBiddingScheme,
    TargetSpendBiddingScheme,
    new_bidding_scheme,
    new_target_roas_bidding_scheme,
)
from core.models.campaign import (
    Campaign,
    CampaignLabel,
    CampaignLabelOperations,
    CampaignOperations,
    CampaignSetting,
    ConversionOptimizerEligibility,
    FrequencyCap,
    NetworkSetting,
    new_dynamic_search_ads_setting,
    new_geo_target_type_setting,
    new_real_time_bidding_setting,
    new_shopping_setting,
    new_tracking_setting,
)
from core.models.common import (
    ApiError,
    AWQLQuery,
    CustomParameter,
    CustomParameters,
    DateRange,
    Label,
    LabelAttribute,
    OrderBy,
    Paging,
    Predicate,
    Selector,
    StringMapEntry,
)
from core.models.extension_setting import (
    CalloutFeedItem,
    CallFeedItem,
    CampaignExtensionSetting,
    CampaignExtensionSettingOperations,
    ExtensionFeedItem,
    ExtensionSetting,
    SitelinkFeedItem,
    StructuredSnippetFeedItem,
)

__all__ = [
    "ApiError",
    "AWQLQuery",
    "Bid",
    "BiddingScheme",
    "BiddingStrategyConfiguration",
    "CalloutFeedItem",
    "CallFeedItem",
    "Campaign",
    "CampaignExtensionSetting",
    "CampaignExtensionSettingOperations",
    "CampaignLabel",
    "CampaignLabelOperations",
    "CampaignOperations",
    "CampaignSetting",
    "ConversionOptimizerEligibility",
    "CustomParameter",
    "CustomParameters",
    "DateRange",
    "ExtensionFeedItem",
    "ExtensionSetting",
    "FrequencyCap",
    "Label",
    "LabelAttribute",
    "ManualCpcBiddingScheme",
    "ManualCpmBiddingScheme",
    "MaximizeConversionsBiddingScheme",
    "NetworkSetting",
    "OrderBy",
    "Paging",
    "Predicate",
    "Selector",
    "SitelinkFeedItem",
    "StringMapEntry",
    "StructuredSnippetFeedItem",
    "TargetCpaBiddingScheme",
    "TargetRoasBiddingScheme",
    "TargetSpendBiddingScheme",
    "new_bidding_scheme",
    "new_dynamic_search_ads_setting",
    "new_geo_target_type_setting",
    "new_real_time_bidding_setting",
    "new_shopping_setting",
    "new_target_roas_bidding_scheme",
    "new_tracking_setting",
]
