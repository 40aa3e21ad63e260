"""Objects found in Product Advertising API responses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Self

_KEY = "json"
_CONVERT = "convert"
_SELF = object()


def _identity(value: Any) -> Any:
    return value


def _scalar(default: Any) -> Callable[[Any], Any]:
    kind = type(default)
    if kind is float:
        return float
    if kind is int:
        return int
    return _identity


def _list_of(item: Callable[[Any], Any]) -> Callable[[Any], list[Any]]:
    def convert(value: Any) -> list[Any]:
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        return [item(entry) for entry in value if entry is not None]

    return convert


def _attr(key: str, default: Any) -> Any:
    return field(default=default, metadata={_KEY: key, _CONVERT: _scalar(default)})


def _nested(key: str, factory: type[Model]) -> Any:
    return field(default_factory=factory, metadata={_KEY: key, _CONVERT: factory.from_dict})


def _many(key: str, item: type[Model] | None = None) -> Any:
    convert = _list_of(item.from_dict if item is not None else _identity)
    return field(default_factory=list, metadata={_KEY: key, _CONVERT: convert})


def _optional(key: str, model: type[Model] | None = None) -> Any:
    convert = model.from_dict if model is not None else _SELF
    return field(default=None, metadata={_KEY: key, _CONVERT: convert})


class Model:
    """Base for response objects decoded from JSON dictionaries."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build an instance from a decoded JSON object; absent or null keys keep their defaults."""
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")
        kwargs = {}
        for f in fields(cls):
            raw = data.get(f.metadata[_KEY])
            if raw is None:
                continue
            convert = f.metadata[_CONVERT]
            if convert is _SELF:
                convert = cls.from_dict
            kwargs[f.name] = convert(raw)
        return cls(**kwargs)


@dataclass
class ApiError(Model):
    type: str = _attr("__type", "")
    code: str = _attr("Code", "")
    message: str = _attr("Message", "")


@dataclass
class RefinementBin(Model):
    display_name: str = _attr("DisplayName", "")
    id: str = _attr("Id", "")


@dataclass
class VariationAttribute(Model):
    name: str = _attr("Name", "")
    value: str = _attr("Value", "")


@dataclass
class BrowseNodeChild(Model):
    context_free_name: str = _attr("ContextFreeName", "")
    display_name: str = _attr("DisplayName", "")
    id: str = _attr("Id", "")


@dataclass
class WebsiteSalesRank(Model):
    context_free_name: str = _attr("ContextFreeName", "")
    display_name: str = _attr("DisplayName", "")
    id: str = _attr("Id", "")
    sales_rank: int = _attr("SalesRank", 0)


@dataclass
class ImageSize(Model):
    url: str = _attr("URL", "")
    height: int = _attr("Height", 0)
    width: int = _attr("Width", 0)


@dataclass
class SingleStringValuedAttribute(Model):
    display_value: str = _attr("DisplayValue", "")
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")


@dataclass
class Contributor(Model):
    locale: str = _attr("Locale", "")
    name: str = _attr("Name", "")
    role: str = _attr("Role", "")


@dataclass
class LanguageType(Model):
    display_value: str = _attr("DisplayValue", "")
    type: str = _attr("Type", "")


@dataclass
class SingleIntegerValuedAttribute(Model):
    display_value: int = _attr("DisplayValue", 0)
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")


@dataclass
class MultiValuedAttribute(Model):
    display_values: list[str] = _many("DisplayValues")
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")


@dataclass
class SingleBooleanValuedAttribute(Model):
    display_value: bool = _attr("DisplayValue", False)
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")


@dataclass
class UnitBasedAttribute(Model):
    display_value: float = _attr("DisplayValue", 0.0)
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")
    unit: str = _attr("Unit", "")


@dataclass
class TradeInPrice(Model):
    amount: float = _attr("Amount", 0.0)
    currency: str = _attr("Currency", "")
    display_amount: str = _attr("DisplayAmount", "")


@dataclass
class OfferAvailability(Model):
    max_order_quantity: int = _attr("MaxOrderQuantity", 0)
    message: str = _attr("Message", "")
    min_order_quantity: int = _attr("MinOrderQuantity", 0)
    type: str = _attr("Type", "")


@dataclass
class OfferShippingCharge(Model):
    amount: float = _attr("Amount", 0.0)
    currency: str = _attr("Currency", "")
    display_amount: str = _attr("DisplayAmount", "")
    is_rate_tax_inclusive: bool = _attr("IsRateTaxInclusive", False)
    type: str = _attr("Type", "")


@dataclass
class OfferLoyaltyPoints(Model):
    points: int = _attr("Points", 0)


@dataclass
class OfferMerchantInfo(Model):
    default_shipping_country: str = _attr("DefaultShippingCountry", "")
    id: str = _attr("Id", "")
    name: str = _attr("Name", "")


@dataclass
class OfferProgramEligibility(Model):
    is_prime_exclusive: bool = _attr("IsPrimeExclusive", False)
    is_prime_pantry: bool = _attr("IsPrimePantry", False)


@dataclass
class OfferPromotion(Model):
    amount: float = _attr("Amount", 0.0)
    currency: str = _attr("Currency", "")
    discount_percent: int = _attr("DiscountPercent", 0)
    display_amount: str = _attr("DisplayAmount", "")
    price_per_unit: float = _attr("PricePerUnit", 0.0)
    type: str = _attr("Type", "")


@dataclass
class OfferSubCondition(Model):
    display_value: str = _attr("DisplayValue", "")
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")
    value: str = _attr("Value", "")


@dataclass
class OfferSavings(Model):
    amount: float = _attr("Amount", 0.0)
    currency: str = _attr("Currency", "")
    display_amount: str = _attr("DisplayAmount", "")
    percentage: int = _attr("Percentage", 0)
    price_per_unit: float = _attr("PricePerUnit", 0.0)


@dataclass
class VariationDimension(Model):
    display_name: str = _attr("DisplayName", "")
    locale: str = _attr("Locale", "")
    name: str = _attr("Name", "")
    values: list[str] = _many("Values")


@dataclass
class OfferV2Availability(Model):
    max_order_quantity: int = _attr("MaxOrderQuantity", 0)
    message: str = _attr("Message", "")
    min_order_quantity: int = _attr("MinOrderQuantity", 0)
    type: str = _attr("Type", "")


@dataclass
class OfferV2Condition(Model):
    condition_note: str = _attr("ConditionNote", "")
    sub_condition: str = _attr("SubCondition", "")
    value: str = _attr("Value", "")


@dataclass
class OfferV2DealDetails(Model):
    access_type: str = _attr("AccessType", "")
    badge: str = _attr("Badge", "")
    early_access_duration_in_milliseconds: int = _attr("EarlyAccessDurationInMilliseconds", 0)
    end_time: str = _attr("EndTime", "")
    percent_claimed: int = _attr("PercentClaimed", 0)
    start_time: str = _attr("StartTime", "")


@dataclass
class OfferV2LoyaltyPoints(Model):
    points: int = _attr("Points", 0)


@dataclass
class OfferV2MerchantInfo(Model):
    id: str = _attr("Id", "")
    name: str = _attr("Name", "")


@dataclass
class OfferV2Money(Model):
    amount: float = _attr("Amount", 0.0)
    currency: str = _attr("Currency", "")
    display_amount: str = _attr("DisplayAmount", "")


@dataclass
class BrowseNodeAncestor(Model):
    ancestor: BrowseNodeAncestor | None = _optional("Ancestor")
    context_free_name: str = _attr("ContextFreeName", "")
    display_name: str = _attr("DisplayName", "")
    id: str = _attr("Id", "")


@dataclass
class Refinement(Model):
    bins: list[RefinementBin] = _many("Bins", RefinementBin)
    display_name: str = _attr("DisplayName", "")
    id: str = _attr("Id", "")


@dataclass
class SearchRefinementsModel(Model):
    browse_node: Refinement = _nested("BrowseNode", Refinement)
    other_refinements: list[Refinement] = _many("OtherRefinements", Refinement)
    search_index: Refinement = _nested("SearchIndex", Refinement)


@dataclass
class BrowseNode(Model):
    ancestor: BrowseNodeAncestor = _nested("Ancestor", BrowseNodeAncestor)
    children: list[BrowseNodeChild] = _many("Children", BrowseNodeChild)
    context_free_name: str = _attr("ContextFreeName", "")
    display_name: str = _attr("DisplayName", "")
    id: str = _attr("Id", "")
    is_root: bool = _attr("IsRoot", False)
    sales_rank: int = _attr("SalesRank", 0)


@dataclass
class BrowseNodesResult(Model):
    browse_nodes: list[BrowseNode] = _many("BrowseNodes", BrowseNode)


@dataclass
class BrowseNodeInfo(Model):
    browse_nodes: list[BrowseNode] = _many("BrowseNodes", BrowseNode)
    website_sales_rank: WebsiteSalesRank = _nested("WebsiteSalesRank", WebsiteSalesRank)


@dataclass
class ImageType(Model):
    small: ImageSize = _nested("Small", ImageSize)
    medium: ImageSize = _nested("Medium", ImageSize)
    large: ImageSize = _nested("Large", ImageSize)


@dataclass
class Images(Model):
    primary: ImageType = _nested("Primary", ImageType)
    variants: list[ImageType] = _many("Variants", ImageType)


@dataclass
class ByLineInfo(Model):
    brand: SingleStringValuedAttribute = _nested("Brand", SingleStringValuedAttribute)
    contributors: list[Contributor] = _many("Contributors", Contributor)
    manufacturer: SingleStringValuedAttribute = _nested("Manufacturer", SingleStringValuedAttribute)


@dataclass
class Classifications(Model):
    binding: SingleStringValuedAttribute = _nested("Binding", SingleStringValuedAttribute)
    product_group: SingleStringValuedAttribute = _nested("ProductGroup", SingleStringValuedAttribute)


@dataclass
class Languages(Model):
    display_values: list[LanguageType] = _many("DisplayValues", LanguageType)
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")


@dataclass
class ContentInfo(Model):
    edition: SingleStringValuedAttribute = _nested("Edition", SingleStringValuedAttribute)
    languages: Languages = _nested("Languages", Languages)
    pages_count: SingleIntegerValuedAttribute = _nested("PagesCount", SingleIntegerValuedAttribute)
    publication_date: SingleStringValuedAttribute = _nested(
        "PublicationDate", SingleStringValuedAttribute
    )


@dataclass
class ContentRating(Model):
    audience_rating: SingleStringValuedAttribute = _nested("AudienceRating", SingleStringValuedAttribute)


@dataclass
class ExternalIds(Model):
    eans: MultiValuedAttribute = _nested("EANs", MultiValuedAttribute)
    isbns: MultiValuedAttribute = _nested("ISBNs", MultiValuedAttribute)
    upcs: MultiValuedAttribute = _nested("UPCs", MultiValuedAttribute)


@dataclass
class ManufactureInfo(Model):
    item_part_number: SingleStringValuedAttribute = _nested("ItemPartNumber", SingleStringValuedAttribute)
    model: SingleStringValuedAttribute = _nested("Model", SingleStringValuedAttribute)
    warranty: SingleStringValuedAttribute = _nested("Warranty", SingleStringValuedAttribute)


@dataclass
class DimensionBasedAttribute(Model):
    height: UnitBasedAttribute = _nested("Height", UnitBasedAttribute)
    length: UnitBasedAttribute = _nested("Length", UnitBasedAttribute)
    weight: UnitBasedAttribute = _nested("Weight", UnitBasedAttribute)
    width: UnitBasedAttribute = _nested("Width", UnitBasedAttribute)


@dataclass
class ProductInfo(Model):
    color: SingleStringValuedAttribute = _nested("Color", SingleStringValuedAttribute)
    is_adult_product: SingleBooleanValuedAttribute = _nested(
        "IsAdultProduct", SingleBooleanValuedAttribute
    )
    item_dimensions: DimensionBasedAttribute = _nested("ItemDimensions", DimensionBasedAttribute)
    release_date: SingleStringValuedAttribute = _nested("ReleaseDate", SingleStringValuedAttribute)
    size: SingleStringValuedAttribute = _nested("Size", SingleStringValuedAttribute)
    unit_count: SingleIntegerValuedAttribute = _nested("UnitCount", SingleIntegerValuedAttribute)


@dataclass
class TechnicalInfo(Model):
    formats: MultiValuedAttribute = _nested("Formats", MultiValuedAttribute)


@dataclass
class TradeInInfo(Model):
    is_eligible_for_trade_in: bool = _attr("IsEligibleForTradeIn", False)
    price: TradeInPrice = _nested("Price", TradeInPrice)


@dataclass
class ItemInfo(Model):
    by_line_info: ByLineInfo = _nested("ByLineInfo", ByLineInfo)
    classifications: Classifications = _nested("Classifications", Classifications)
    content_info: ContentInfo = _nested("ContentInfo", ContentInfo)
    content_rating: ContentRating = _nested("ContentRating", ContentRating)
    external_ids: ExternalIds = _nested("ExternalIds", ExternalIds)
    features: MultiValuedAttribute = _nested("Features", MultiValuedAttribute)
    manufacture_info: ManufactureInfo = _nested("ManufactureInfo", ManufactureInfo)
    product_info: ProductInfo = _nested("ProductInfo", ProductInfo)
    technical_info: TechnicalInfo = _nested("TechnicalInfo", TechnicalInfo)
    title: SingleStringValuedAttribute = _nested("Title", SingleStringValuedAttribute)
    trade_in_info: TradeInInfo = _nested("TradeInInfo", TradeInInfo)


@dataclass
class OfferDeliveryInfo(Model):
    is_amazon_fulfilled: bool = _attr("IsAmazonFulfilled", False)
    is_free_shipping_eligible: bool = _attr("IsFreeShippingEligible", False)
    is_prime_eligible: bool = _attr("IsPrimeEligible", False)
    shipping_charges: list[OfferShippingCharge] = _many("ShippingCharges", OfferShippingCharge)


@dataclass
class OfferCondition(Model):
    display_value: str = _attr("DisplayValue", "")
    label: str = _attr("Label", "")
    locale: str = _attr("Locale", "")
    value: str = _attr("Value", "")
    sub_condition: OfferSubCondition = _nested("SubCondition", OfferSubCondition)


@dataclass
class OfferPrice(Model):
    amount: float = _attr("Amount", 0.0)
    currency: str = _attr("Currency", "")
    display_amount: str = _attr("DisplayAmount", "")
    price_per_unit: float = _attr("PricePerUnit", 0.0)
    savings: OfferSavings = _nested("Savings", OfferSavings)


@dataclass
class OfferListing(Model):
    availability: OfferAvailability = _nested("Availability", OfferAvailability)
    condition: OfferCondition = _nested("Condition", OfferCondition)
    delivery_info: OfferDeliveryInfo = _nested("DeliveryInfo", OfferDeliveryInfo)
    id: str = _attr("Id", "")
    is_buy_box_winner: bool = _attr("IsBuyBoxWinner", False)
    loyalty_points: OfferLoyaltyPoints = _nested("LoyaltyPoints", OfferLoyaltyPoints)
    merchant_info: OfferMerchantInfo = _nested("MerchantInfo", OfferMerchantInfo)
    price: OfferPrice = _nested("Price", OfferPrice)
    program_eligibility: OfferProgramEligibility = _nested("ProgramEligibility", OfferProgramEligibility)
    promotions: list[OfferPromotion] = _many("Promotions", OfferPromotion)
    saving_basis: OfferPrice = _nested("SavingBasis", OfferPrice)
    violates_map: bool = _attr("ViolatesMAP", False)


@dataclass
class OfferSummary(Model):
    condition: OfferCondition = _nested("Condition", OfferCondition)
    highest_price: OfferPrice = _nested("HighestPrice", OfferPrice)
    lowest_price: OfferPrice = _nested("LowestPrice", OfferPrice)
    offer_count: int = _attr("OfferCount", 0)


@dataclass
class Offers(Model):
    listings: list[OfferListing] = _many("Listings", OfferListing)
    summaries: list[OfferSummary] = _many("Summaries", OfferSummary)


@dataclass
class DurationPrice(Model):
    price: OfferPrice = _nested("Price", OfferPrice)
    duration: UnitBasedAttribute = _nested("Duration", UnitBasedAttribute)


@dataclass
class RentalOfferListing(Model):
    availability: OfferAvailability = _nested("Availability", OfferAvailability)
    base_price: DurationPrice = _nested("BasePrice", DurationPrice)
    condition: OfferCondition = _nested("Condition", OfferCondition)
    delivery_info: OfferDeliveryInfo = _nested("DeliveryInfo", OfferDeliveryInfo)
    id: str = _attr("Id", "")
    merchant_info: OfferMerchantInfo = _nested("MerchantInfo", OfferMerchantInfo)


@dataclass
class RentalOffers(Model):
    listings: list[RentalOfferListing] = _many("Listings", RentalOfferListing)


@dataclass
class OfferV2SavingBasis(Model):
    money: OfferV2Money = _nested("Money", OfferV2Money)
    saving_basis_type: str = _attr("SavingBasisType", "")
    saving_basis_type_label: str = _attr("SavingBasisTypeLabel", "")


@dataclass
class OfferV2Savings(Model):
    money: OfferV2Money = _nested("Money", OfferV2Money)
    percentage: int = _attr("Percentage", 0)


@dataclass
class OfferV2Price(Model):
    money: OfferV2Money = _nested("Money", OfferV2Money)
    price_per_unit: OfferV2Money = _nested("PricePerUnit", OfferV2Money)
    saving_basis: OfferV2SavingBasis | None = _optional("SavingBasis", OfferV2SavingBasis)
    savings: OfferV2Savings | None = _optional("Savings", OfferV2Savings)


@dataclass
class OfferV2Listing(Model):
    availability: OfferV2Availability = _nested("Availability", OfferV2Availability)
    condition: OfferV2Condition = _nested("Condition", OfferV2Condition)
    deal_details: OfferV2DealDetails = _nested("DealDetails", OfferV2DealDetails)
    is_buy_box_winner: bool = _attr("IsBuyBoxWinner", False)
    loyalty_points: OfferV2LoyaltyPoints = _nested("LoyaltyPoints", OfferV2LoyaltyPoints)
    merchant_info: OfferV2MerchantInfo = _nested("MerchantInfo", OfferV2MerchantInfo)
    price: OfferV2Price = _nested("Price", OfferV2Price)
    type: str = _attr("Type", "")
    violates_map: bool = _attr("ViolatesMAP", False)


@dataclass
class OffersV2(Model):
    listings: list[OfferV2Listing] = _many("Listings", OfferV2Listing)


@dataclass
class Item(Model):
    asin: str = _attr("ASIN", "")
    browse_node_info: BrowseNodeInfo = _nested("BrowseNodeInfo", BrowseNodeInfo)
    detail_page_url: str = _attr("DetailPageURL", "")
    images: Images = _nested("Images", Images)
    item_info: ItemInfo = _nested("ItemInfo", ItemInfo)
    offers: Offers = _nested("Offers", Offers)
    offers_v2: OffersV2 = _nested("OffersV2", OffersV2)
    parent_asin: str = _attr("ParentASIN", "")
    rental_offers: RentalOffers = _nested("RentalOffers", RentalOffers)
    score: float = _attr("Score", 0.0)
    variation_attributes: list[VariationAttribute] = _many("VariationAttributes", VariationAttribute)


@dataclass
class Price(Model):
    highest_price: OfferPrice = _nested("HighestPrice", OfferPrice)
    lowest_price: OfferPrice = _nested("LowestPrice", OfferPrice)


@dataclass
class VariationSummary(Model):
    page_count: int = _attr("PageCount", 0)
    price: Price = _nested("Price", Price)
    variation_count: int = _attr("VariationCount", 0)
    variation_dimensions: list[VariationDimension] = _many("VariationDimensions", VariationDimension)


@dataclass
class ItemsResult(Model):
    items: list[Item] = _many("Items", Item)


@dataclass
class VariationsResult(Model):
    items: list[Item] = _many("Items", Item)
    variation_summary: VariationSummary = _nested("VariationSummary", VariationSummary)


@dataclass
class SearchResult(Model):
    total_result_count: int = _attr("TotalResultCount", 0)
    search_url: str = _attr("SearchURL", "")
    items: list[Item] = _many("Items", Item)
    search_refinements: SearchRefinementsModel = _nested("SearchRefinements", SearchRefinementsModel)