from typing import Dict, List, Optional

from pydantic import Field

from core.models.bidding import BiddingStrategyConfiguration
from core.models.common import (
    CustomParameters,
    Label,
    StringMapEntry,
    WireModel,
)
from core.wire.namespaces import XSI_TYPE


class ConversionOptimizerEligibility(WireModel):
    """Whether the campaign qualifies for conversion optimization and why not.

    Rejection reasons: CAMPAIGN_IS_NOT_ACTIVE, NOT_CPC_CAMPAIGN,
    CONVERSION_TRACKING_NOT_ENABLED, NOT_ENOUGH_CONVERSIONS, UNKNOWN.
    """

    eligible: bool = False
    rejection_reasons: List[str] = Field(default_factory=list, alias="rejectionReasons")


class FrequencyCap(WireModel):
    impressions: int
    time_unit: str = Field(..., alias="timeUnit")
    level: Optional[str] = None


class CampaignSetting(WireModel):
    """One ``settings`` entry.

    The service returns several setting kinds under the same element; the
    kind is in ``type`` and only the fields of that kind are populated.
    """

    type: str = Field(..., alias=XSI_TYPE)

    # GeoTargetTypeSetting
    positive_geo_target_type: Optional[str] = Field(None, alias="positiveGeoTargetType")
    negative_geo_target_type: Optional[str] = Field(None, alias="negativeGeoTargetType")

    # RealTimeBiddingSetting
    opt_in: Optional[bool] = Field(None, alias="optIn")

    # DynamicSearchAdsSetting
    domain_name: Optional[str] = Field(None, alias="domainName")
    language_code: Optional[str] = Field(None, alias="languageCode")

    # TrackingSetting
    tracking_url: Optional[str] = Field(None, alias="trackingUrl")

    # ShoppingSetting
    merchant_id: Optional[int] = Field(None, alias="merchantId")
    sales_country: Optional[str] = Field(None, alias="salesCountry")
    campaign_priority: Optional[int] = Field(None, alias="campaignPriority")
    enable_local: Optional[bool] = Field(None, alias="enableLocal")


def new_dynamic_search_ads_setting(domain_name: str, language_code: str) -> CampaignSetting:
    return CampaignSetting(
        type="DynamicSearchAdsSetting",
        domain_name=domain_name,
        language_code=language_code,
    )


def new_geo_target_type_setting(
    positive_geo_target_type: str, negative_geo_target_type: str
) -> CampaignSetting:
    return CampaignSetting(
        type="GeoTargetTypeSetting",
        positive_geo_target_type=positive_geo_target_type,
        negative_geo_target_type=negative_geo_target_type,
    )


def new_real_time_bidding_setting(opt_in: bool) -> CampaignSetting:
    return CampaignSetting(type="RealTimeBiddingSetting", opt_in=opt_in)


def new_tracking_setting(tracking_url: str) -> CampaignSetting:
    return CampaignSetting(type="TrackingSetting", tracking_url=tracking_url)


def new_shopping_setting(
    merchant_id: int, sales_country: str, campaign_priority: int, enable_local: bool
) -> CampaignSetting:
    return CampaignSetting(
        type="ShoppingSetting",
        merchant_id=merchant_id,
        sales_country=sales_country,
        campaign_priority=campaign_priority,
        enable_local=enable_local,
    )


class NetworkSetting(WireModel):
    target_google_search: bool = Field(False, alias="targetGoogleSearch")
    target_search_network: bool = Field(False, alias="targetSearchNetwork")
    target_content_network: bool = Field(False, alias="targetContentNetwork")
    target_partner_search_network: bool = Field(False, alias="targetPartnerSearchNetwork")


class Campaign(WireModel):
    id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[str] = None  # ENABLED, PAUSED, REMOVED
    serving_status: Optional[str] = Field(None, alias="servingStatus")  # SERVING, NONE, ENDED, PENDING, SUSPENDED
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    budget_id: Optional[int] = Field(None, alias="budget>budgetId")
    conversion_optimizer_eligibility: Optional[ConversionOptimizerEligibility] = Field(
        None, alias="conversionOptimizerEligibility"
    )
    ad_serving_optimization_status: Optional[str] = Field(
        None, alias="adServingOptimizationStatus"
    )
    frequency_cap: Optional[FrequencyCap] = Field(None, alias="frequencyCap")
    settings: List[CampaignSetting] = Field(default_factory=list)
    advertising_channel_type: Optional[str] = Field(None, alias="advertisingChannelType")  # SEARCH, DISPLAY, SHOPPING
    advertising_channel_sub_type: Optional[str] = Field(
        None, alias="advertisingChannelSubType"
    )
    network_setting: Optional[NetworkSetting] = Field(None, alias="networkSetting")
    labels: List[Label] = Field(default_factory=list)
    bidding_strategy_configuration: Optional[BiddingStrategyConfiguration] = Field(
        None, alias="biddingStrategyConfiguration"
    )
    forward_compatibility_map: List[StringMapEntry] = Field(
        default_factory=list, alias="forwardCompatibilityMap"
    )
    tracking_url_template: Optional[str] = Field(None, alias="trackingUrlTemplate")
    url_custom_parameters: Optional[CustomParameters] = Field(
        None, alias="urlCustomParameters"
    )
    base_campaign_id: Optional[int] = Field(None, alias="baseCampaignId")
    campaign_trial_type: Optional[str] = Field(None, alias="campaignTrialType")


class CampaignLabel(WireModel):
    campaign_id: int = Field(..., alias="campaignId")
    label_id: int = Field(..., alias="labelId")


# Operator ("ADD", "SET", "REMOVE") -> operands, sent in insertion order.
CampaignOperations = Dict[str, List[Campaign]]
CampaignLabelOperations = Dict[str, List[CampaignLabel]]
