import xml.etree.ElementTree as ET

import pytest

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
)
from core.models.campaign import (
    Campaign,
    CampaignLabel,
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
    CustomParameter,
    CustomParameters,
    Label,
    LabelAttribute,
    StringMapEntry,
)
from core.models.extension_setting import (
    CalloutFeedItem,
    CallFeedItem,
    CampaignExtensionSetting,
    ExtensionFeedItem,
    ExtensionSetting,
    SitelinkFeedItem,
    StructuredSnippetFeedItem,
)
from core.wire.decoder import decode, decode_all, find_path, find_text, parse
from core.wire.encoder import encode, to_string
from exceptions.custom_exceptions import AdWordsDecodeException

XSI = 'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'


def _xml(text: str) -> ET.Element:
    return ET.fromstring(text)


def _strategy(scheme_xml: str) -> ET.Element:
    return _xml(
        f"<biddingStrategyConfiguration {XSI}>"
        "<biddingStrategyType>MANUAL_CPC</biddingStrategyType>"
        f"{scheme_xml}"
        "</biddingStrategyConfiguration>"
    )


# ===========================================================================
# BIDDING SCHEME VARIANTS
# ===========================================================================


class TestBiddingSchemeVariants:
    def test_manual_cpc_selected_by_type(self):
        element = _strategy(
            '<biddingScheme xsi:type="ManualCpcBiddingScheme">'
            "<BiddingScheme.Type>ManualCpcBiddingScheme</BiddingScheme.Type>"
            "<enhancedCpcEnabled>true</enhancedCpcEnabled>"
            "</biddingScheme>"
        )
        config = decode(BiddingStrategyConfiguration, element)

        assert config.strategy_type == "MANUAL_CPC"
        assert isinstance(config.scheme, ManualCpcBiddingScheme)
        assert config.scheme.enhanced_cpc_enabled is True
        assert config.scheme.get_type() == "ManualCpcBiddingScheme"

    def test_target_roas_selected_by_type(self):
        element = _strategy(
            '<biddingScheme xsi:type="TargetRoasBiddingScheme">'
            "<targetRoas>2.5</targetRoas>"
            "<bidCeiling><microAmount>3000000</microAmount></bidCeiling>"
            "</biddingScheme>"
        )
        scheme = decode(BiddingStrategyConfiguration, element).scheme

        assert isinstance(scheme, TargetRoasBiddingScheme)
        assert scheme.target_roas == 2.5
        assert scheme.bid_ceiling == 3_000_000
        assert scheme.bid_floor is None

    def test_namespace_prefix_on_type_is_ignored(self):
        element = _strategy(
            '<biddingScheme xsi:type="cm:MaximizeConversionsBiddingScheme"/>'
        )
        scheme = decode(BiddingStrategyConfiguration, element).scheme

        assert isinstance(scheme, MaximizeConversionsBiddingScheme)
        assert scheme.type == "MaximizeConversionsBiddingScheme"

    def test_unknown_type_is_skipped_when_not_strict(self):
        element = _strategy(
            '<biddingScheme xsi:type="PageOnePromotedBiddingScheme">'
            "<strategyGoal>PAGE_ONE</strategyGoal>"
            "</biddingScheme>"
        )
        config = decode(BiddingStrategyConfiguration, element, strict=False)

        assert config.scheme is None
        assert config.strategy_type == "MANUAL_CPC"

    def test_unknown_type_raises_when_strict(self):
        element = _strategy('<biddingScheme xsi:type="PageOnePromotedBiddingScheme"/>')

        with pytest.raises(AdWordsDecodeException, match="PageOnePromotedBiddingScheme"):
            decode(BiddingStrategyConfiguration, element, strict=True)

    def test_missing_type_raises_even_when_not_strict(self):
        element = _strategy(
            "<biddingScheme><enhancedCpcEnabled>true</enhancedCpcEnabled></biddingScheme>"
        )

        with pytest.raises(AdWordsDecodeException, match="Missing xsi:type"):
            decode(BiddingStrategyConfiguration, element, strict=False)

    def test_bids_decode_micro_amount(self):
        element = _strategy(
            '<bids xsi:type="CpcBid">'
            "<Bids.Type>CpcBid</Bids.Type>"
            "<bid><microAmount>1200000</microAmount></bid>"
            "<cpcBidSource>ADGROUP</cpcBidSource>"
            "</bids>"
        )
        bids = decode(BiddingStrategyConfiguration, element).bids

        assert len(bids) == 1
        assert bids[0].type == "CpcBid"
        assert bids[0].amount == 1_200_000
        assert bids[0].cpc_bid_source == "ADGROUP"


# ===========================================================================
# EXTENSION FEED ITEM VARIANTS
# ===========================================================================


EXTENSIONS_XML = f"""
<extensionSetting {XSI}>
  <extensions xsi:type="SitelinkFeedItem">
    <feedId>11</feedId>
    <feedItemId>101</feedItemId>
    <status>ENABLED</status>
    <feedType>SITELINK</feedType>
    <ExtensionFeedItem.Type>SitelinkFeedItem</ExtensionFeedItem.Type>
    <sitelinkText>Store hours</sitelinkText>
    <sitelinkFinalUrls><urls>https://example.com/hours</urls></sitelinkFinalUrls>
  </extensions>
  <extensions xsi:type="PriceFeedItem">
    <feedId>12</feedId>
    <priceExtensionType>BRANDS</priceExtensionType>
  </extensions>
  <extensions xsi:type="CalloutFeedItem">
    <feedId>13</feedId>
    <calloutText>Free shipping</calloutText>
  </extensions>
  <extensions xsi:type="StructuredSnippetFeedItem">
    <header>Brands</header>
    <values>Acme</values>
    <values>Globex</values>
  </extensions>
  <platformRestrictions>NONE</platformRestrictions>
</extensionSetting>
"""


class TestExtensionFeedItemVariants:
    def test_known_items_decode_and_unknown_are_dropped(self):
        setting = decode(ExtensionSetting, _xml(EXTENSIONS_XML), strict=False)

        assert [type(item) for item in setting.extensions] == [
            SitelinkFeedItem,
            CalloutFeedItem,
            StructuredSnippetFeedItem,
        ]
        assert setting.platform_restrictions == "NONE"

    def test_sitelink_fields(self):
        sitelink = decode(ExtensionSetting, _xml(EXTENSIONS_XML)).extensions[0]

        assert sitelink.feed_id == 11
        assert sitelink.feed_item_id == 101
        assert sitelink.sitelink_text == "Store hours"
        assert sitelink.sitelink_final_urls == ["https://example.com/hours"]
        assert sitelink.type == "SitelinkFeedItem"

    def test_repeated_string_values(self):
        snippet = decode(ExtensionSetting, _xml(EXTENSIONS_XML)).extensions[2]

        assert snippet.header == "Brands"
        assert snippet.values == ["Acme", "Globex"]

    def test_unknown_item_raises_when_strict(self):
        with pytest.raises(AdWordsDecodeException, match="PriceFeedItem"):
            decode(ExtensionSetting, _xml(EXTENSIONS_XML), strict=True)


# ===========================================================================
# PLAIN SHAPES AND FAILURES
# ===========================================================================


class TestPlainShapes:
    def test_nil_and_empty_elements(self):
        element = _xml(
            f"<entries {XSI}>"
            "<id>42</id>"
            "<name/>"
            '<endDate xsi:nil="true"/>'
            "</entries>"
        )
        campaign = decode(Campaign, element)

        assert campaign.id == 42
        assert campaign.name == ""
        assert campaign.end_date is None

    def test_namespaced_elements_match_on_local_name(self):
        element = _xml(
            '<entries xmlns="https://adwords.google.com/api/adwords/cm/v201806">'
            "<id>7</id><budget><budgetId>99</budgetId></budget>"
            "</entries>"
        )
        campaign = decode(Campaign, element)

        assert campaign.id == 7
        assert campaign.budget_id == 99

    def test_invalid_scalar_raises_decode_error(self):
        element = _xml(
            "<frequencyCap><impressions>lots</impressions><timeUnit>DAY</timeUnit></frequencyCap>"
        )

        with pytest.raises(AdWordsDecodeException) as exc_info:
            decode(FrequencyCap, element)
        assert exc_info.value.details["errors"][0]["loc"] == ("impressions",)

    def test_malformed_xml_raises_decode_error(self):
        with pytest.raises(AdWordsDecodeException, match="Malformed XML"):
            parse(b"<rval><entries></rval>")


class TestPathHelpers:
    ELEMENT = (
        "<getResponse><rval>"
        "<totalNumEntries>2</totalNumEntries>"
        "<entries><id>1</id></entries>"
        "<entries><id>2</id></entries>"
        "</rval></getResponse>"
    )

    def test_find_path_collects_last_segment(self):
        assert len(find_path(_xml(self.ELEMENT), "rval>entries")) == 2

    def test_find_path_missing_prefix(self):
        assert find_path(_xml(self.ELEMENT), "value>entries") == []

    def test_find_text(self):
        assert find_text(_xml(self.ELEMENT), "rval>totalNumEntries") == "2"
        assert find_text(_xml(self.ELEMENT), "rval>missing") is None

    def test_decode_all(self):
        campaigns = decode_all(Campaign, _xml(self.ELEMENT), "rval>entries")

        assert [c.id for c in campaigns] == [1, 2]

    def test_decode_all_skips_nil_elements(self):
        element = _xml(
            f"<rval {XSI}>"
            "<value><campaignId>1</campaignId><labelId>2</labelId></value>"
            '<value xsi:nil="true"/>'
            "</rval>"
        )

        labels = decode_all(CampaignLabel, element, "value")

        assert labels == [CampaignLabel(campaign_id=1, label_id=2)]

    def test_nil_element_decodes_as_none(self):
        assert decode(Campaign, _xml(f'<value {XSI} xsi:nil="true"/>')) is None


# ===========================================================================
# ROUND TRIPS THROUGH THE SERVICE NAMESPACE
# ===========================================================================


NS = "https://adwords.google.com/api/adwords/cm/v201806"

FULL_CAMPAIGN = Campaign(
    id=1001,
    name="Spring Sale",
    status="PAUSED",
    serving_status="SERVING",
    start_date="20180601",
    end_date="20371230",
    budget_id=321543214,
    conversion_optimizer_eligibility=ConversionOptimizerEligibility(
        eligible=False,
        rejection_reasons=["NOT_CPC_CAMPAIGN", "NOT_ENOUGH_CONVERSIONS"],
    ),
    ad_serving_optimization_status="ROTATE",
    frequency_cap=FrequencyCap(impressions=5, time_unit="DAY", level="ADGROUP"),
    settings=[
        new_dynamic_search_ads_setting("example.com", "en"),
        new_geo_target_type_setting("AREA_OF_INTEREST", "DONT_CARE"),
        new_real_time_bidding_setting(False),
        new_tracking_setting("https://track.example.com/{lpurl}"),
        new_shopping_setting(1234, "US", 2, True),
    ],
    advertising_channel_type="SEARCH",
    advertising_channel_sub_type="SEARCH_MOBILE_APP",
    network_setting=NetworkSetting(target_google_search=True, target_search_network=True),
    labels=[
        Label(
            id=77,
            name="q2",
            status="ENABLED",
            attribute=LabelAttribute(
                type="DisplayAttribute", background_color="#00FF00", description="q2 push"
            ),
        )
    ],
    bidding_strategy_configuration=BiddingStrategyConfiguration(
        strategy_id=9,
        strategy_name="roas",
        strategy_type="TARGET_ROAS",
        strategy_source="CAMPAIGN",
        scheme=TargetRoasBiddingScheme(target_roas=3.5, bid_ceiling=4_000_000),
        bids=[Bid(type="CpcBid", amount=1_500_000, cpc_bid_source="CAMPAIGN")],
    ),
    forward_compatibility_map=[StringMapEntry(key="Campaign.feature", value="on")],
    tracking_url_template="https://track.example.com/?u={lpurl}",
    url_custom_parameters=CustomParameters(
        parameters=[CustomParameter(key="season", value="spring", is_remove=False)],
        do_replace=True,
    ),
    base_campaign_id=1000,
    campaign_trial_type="BASE",
)

FULL_EXTENSION_SETTING = CampaignExtensionSetting(
    campaign_id=1001,
    extension_type="SITELINK",
    extension_setting=ExtensionSetting(
        extensions=[
            SitelinkFeedItem(
                feed_id=11,
                feed_item_id=101,
                status="ENABLED",
                feed_type="SITELINK",
                start_time="20180601 000000",
                end_time="20181231 235959",
                device_preference=30001,
                sitelink_text="Store hours",
                sitelink_url="https://example.com/hours",
                sitelink_line2="Open late",
                sitelink_line3="Every day",
                sitelink_final_urls=["https://example.com/hours"],
                sitelink_final_mobile_urls=["https://m.example.com/hours"],
                sitelink_tracking_url_template="https://track.example.com/{lpurl}",
                sitelink_final_url_suffix="src=sitelink",
                sitelink_url_custom_parameters=CustomParameters(
                    parameters=[CustomParameter(key="slot", value="1")]
                ),
            ),
            CalloutFeedItem(callout_text="Free shipping"),
        ],
        platform_restrictions="MOBILE",
    ),
)

ROUND_TRIPS = [
    (BiddingScheme, ManualCpcBiddingScheme(enhanced_cpc_enabled=True)),
    (BiddingScheme, ManualCpmBiddingScheme(viewable_cpm_enabled=True)),
    (
        BiddingScheme,
        TargetRoasBiddingScheme(target_roas=2.5, bid_ceiling=3_000_000, bid_floor=100_000),
    ),
    (
        BiddingScheme,
        TargetCpaBiddingScheme(
            target_cpa=2_000_000, max_cpc_bid_ceiling=900_000, max_cpc_bid_floor=50_000
        ),
    ),
    (BiddingScheme, TargetSpendBiddingScheme(bid_ceiling=700_000, spend_target=10_000_000)),
    (BiddingScheme, MaximizeConversionsBiddingScheme()),
    (ExtensionFeedItem, FULL_EXTENSION_SETTING.extension_setting.extensions[0]),
    (ExtensionFeedItem, CalloutFeedItem(feed_item_id=201, callout_text="24/7 support")),
    (ExtensionFeedItem, StructuredSnippetFeedItem(header="Brands", values=["Acme", "Globex"])),
    (
        ExtensionFeedItem,
        CallFeedItem(
            call_phone_number="(650) 253-0000",
            call_country_code="US",
            call_tracking=True,
            call_conversion_type_id=555,
            disable_call_conversion_tracking=False,
        ),
    ),
    (Campaign, FULL_CAMPAIGN),
    (CampaignExtensionSetting, FULL_EXTENSION_SETTING),
]


@pytest.mark.parametrize(
    "model_cls, model",
    ROUND_TRIPS,
    ids=[type(model).__name__ for _, model in ROUND_TRIPS],
)
def test_round_trip_through_namespace(model_cls, model):
    payload = to_string(encode(model, "operand", NS))

    decoded = decode(model_cls, parse(payload), strict=True)

    assert type(decoded) is type(model)
    assert decoded == model


def test_round_trip_keeps_nested_paths():
    payload = to_string(encode(FULL_CAMPAIGN.bidding_strategy_configuration, "config", NS))
    element = parse(payload)

    assert find_text(element, "biddingScheme>bidCeiling>microAmount") == "4000000"
    assert find_text(element, "bids>bid>microAmount") == "1500000"

    call = CallFeedItem(call_conversion_type_id=555)
    call_element = parse(to_string(encode(call, "extensions", NS)))
    assert find_text(call_element, "callConversionType>conversionTypeId") == "555"
