from typing import ClassVar, Dict, List, Optional

from pydantic import Field

from core.models.common import CustomParameters, PolymorphicModel, WireModel


class ExtensionFeedItem(PolymorphicModel):
    """Root of the feed item variants carried by an ExtensionSetting."""

    variants: ClassVar[Dict[str, type]] = {}

    feed_id: Optional[int] = Field(None, alias="feedId")
    feed_item_id: Optional[int] = Field(None, alias="feedItemId")
    status: Optional[str] = None
    feed_type: Optional[str] = Field(None, alias="feedType")
    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")
    device_preference: Optional[int] = Field(None, alias="devicePreference>devicePreference")


class SitelinkFeedItem(ExtensionFeedItem):
    xsi_type: ClassVar[str] = "SitelinkFeedItem"

    sitelink_text: Optional[str] = Field(None, alias="sitelinkText")
    sitelink_url: Optional[str] = Field(None, alias="sitelinkUrl")
    sitelink_line2: Optional[str] = Field(None, alias="sitelinkLine2")
    sitelink_line3: Optional[str] = Field(None, alias="sitelinkLine3")
    sitelink_final_urls: List[str] = Field(default_factory=list, alias="sitelinkFinalUrls>urls")
    sitelink_final_mobile_urls: List[str] = Field(
        default_factory=list, alias="sitelinkFinalMobileUrls>urls"
    )
    sitelink_tracking_url_template: Optional[str] = Field(
        None, alias="sitelinkTrackingUrlTemplate"
    )
    sitelink_final_url_suffix: Optional[str] = Field(None, alias="sitelinkFinalUrlSuffix")
    sitelink_url_custom_parameters: Optional[CustomParameters] = Field(
        None, alias="sitelinkUrlCustomParameters"
    )


class CalloutFeedItem(ExtensionFeedItem):
    xsi_type: ClassVar[str] = "CalloutFeedItem"

    callout_text: Optional[str] = Field(None, alias="calloutText")


class StructuredSnippetFeedItem(ExtensionFeedItem):
    xsi_type: ClassVar[str] = "StructuredSnippetFeedItem"

    header: Optional[str] = None
    values: List[str] = Field(default_factory=list)


class CallFeedItem(ExtensionFeedItem):
    xsi_type: ClassVar[str] = "CallFeedItem"

    call_phone_number: Optional[str] = Field(None, alias="callPhoneNumber")
    call_country_code: Optional[str] = Field(None, alias="callCountryCode")
    call_tracking: Optional[bool] = Field(None, alias="callTracking")
    call_conversion_type_id: Optional[int] = Field(
        None, alias="callConversionType>conversionTypeId"
    )
    disable_call_conversion_tracking: Optional[bool] = Field(
        None, alias="disableCallConversionTracking"
    )


class ExtensionSetting(WireModel):
    """Which extensions serve at a given level (customer, campaign or ad group)."""

    extensions: List[ExtensionFeedItem] = Field(default_factory=list)
    platform_restrictions: str = Field("NONE", alias="platformRestrictions")  # NONE, MOBILE, DESKTOP


class CampaignExtensionSetting(WireModel):
    """Extensions served for one campaign, grouped by extension type."""

    campaign_id: Optional[int] = Field(None, alias="campaignId")
    extension_type: str = Field(..., alias="extensionType")
    extension_setting: Optional[ExtensionSetting] = Field(None, alias="extensionSetting")

    def _items_of(self, variant: type) -> list:
        if self.extension_setting is None:
            return []
        return [item for item in self.extension_setting.extensions if isinstance(item, variant)]

    def get_sitelinks(self) -> List[SitelinkFeedItem]:
        return self._items_of(SitelinkFeedItem)

    def get_callouts(self) -> List[CalloutFeedItem]:
        return self._items_of(CalloutFeedItem)


# Keys are "ADD", "SET" and "REMOVE" (case sensitive).
CampaignExtensionSettingOperations = Dict[str, List[CampaignExtensionSetting]]
