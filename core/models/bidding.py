from typing import ClassVar, Dict, List, Optional

from pydantic import Field

from core.models.common import PolymorphicModel, WireModel
from core.wire.namespaces import XSI_TYPE


class BiddingScheme(PolymorphicModel):
    """Root of the bidding scheme variants, keyed by ``xsi:type``."""

    variants: ClassVar[Dict[str, type]] = {}


class ManualCpcBiddingScheme(BiddingScheme):
    xsi_type: ClassVar[str] = "ManualCpcBiddingScheme"

    enhanced_cpc_enabled: bool = Field(False, alias="enhancedCpcEnabled")


class ManualCpmBiddingScheme(BiddingScheme):
    xsi_type: ClassVar[str] = "ManualCpmBiddingScheme"

    viewable_cpm_enabled: Optional[bool] = Field(None, alias="viewableCpmEnabled")


class TargetRoasBiddingScheme(BiddingScheme):
    xsi_type: ClassVar[str] = "TargetRoasBiddingScheme"

    target_roas: float = Field(..., alias="targetRoas")
    bid_ceiling: Optional[int] = Field(None, alias="bidCeiling>microAmount")
    bid_floor: Optional[int] = Field(None, alias="bidFloor>microAmount")


class TargetCpaBiddingScheme(BiddingScheme):
    xsi_type: ClassVar[str] = "TargetCpaBiddingScheme"

    target_cpa: Optional[int] = Field(None, alias="targetCpa>microAmount")
    max_cpc_bid_ceiling: Optional[int] = Field(None, alias="maxCpcBidCeiling>microAmount")
    max_cpc_bid_floor: Optional[int] = Field(None, alias="maxCpcBidFloor>microAmount")


class TargetSpendBiddingScheme(BiddingScheme):
    xsi_type: ClassVar[str] = "TargetSpendBiddingScheme"

    bid_ceiling: Optional[int] = Field(None, alias="bidCeiling>microAmount")
    spend_target: Optional[int] = Field(None, alias="spendTarget>microAmount")


class MaximizeConversionsBiddingScheme(BiddingScheme):
    xsi_type: ClassVar[str] = "MaximizeConversionsBiddingScheme"


def new_bidding_scheme(enhanced_cpc_enabled: bool) -> ManualCpcBiddingScheme:
    return ManualCpcBiddingScheme(enhanced_cpc_enabled=enhanced_cpc_enabled)


def new_target_roas_bidding_scheme(
    target_roas: float,
    bid_ceiling: Optional[int] = None,
    bid_floor: Optional[int] = None,
) -> TargetRoasBiddingScheme:
    return TargetRoasBiddingScheme(
        target_roas=target_roas, bid_ceiling=bid_ceiling, bid_floor=bid_floor
    )


class Bid(WireModel):
    """A bid attached to a strategy configuration (``CpcBid``, ``CpmBid``...)."""

    type: Optional[str] = Field(None, alias=XSI_TYPE)
    amount: Optional[int] = Field(None, alias="bid>microAmount")
    cpc_bid_source: Optional[str] = Field(None, alias="cpcBidSource")
    cpm_bid_source: Optional[str] = Field(None, alias="cpmBidSource")


class BiddingStrategyConfiguration(WireModel):
    strategy_id: Optional[int] = Field(None, alias="biddingStrategyId")
    strategy_name: Optional[str] = Field(None, alias="biddingStrategyName")
    strategy_type: Optional[str] = Field(None, alias="biddingStrategyType")
    strategy_source: Optional[str] = Field(None, alias="biddingStrategySource")
    scheme: Optional[BiddingScheme] = Field(None, alias="biddingScheme")
    bids: List[Bid] = Field(default_factory=list)
