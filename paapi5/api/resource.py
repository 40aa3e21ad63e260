"""Resources that select what information an operation returns."""

from enum import StrEnum


class Resource(StrEnum):
    """A response resource that can be requested from an operation."""

    BROWSE_NODES_ANCESTOR = "BrowseNodes.Ancestor"
    BROWSE_NODES_CHILDREN = "BrowseNodes.Children"
    BROWSE_NODE_INFO_BROWSE_NODES = "BrowseNodeInfo.BrowseNodes"
    BROWSE_NODE_INFO_BROWSE_NODES_ANCESTOR = "BrowseNodeInfo.BrowseNodes.Ancestor"
    BROWSE_NODE_INFO_BROWSE_NODES_SALES_RANK = "BrowseNodeInfo.BrowseNodes.SalesRank"
    BROWSE_NODE_INFO_WEBSITE_SALES_RANK = "BrowseNodeInfo.WebsiteSalesRank"
    CUSTOMER_REVIEWS_COUNT = "CustomerReviews.Count"
    CUSTOMER_REVIEWS_STAR_RATING = "CustomerReviews.StarRating"
    IMAGES_PRIMARY_SMALL = "Images.Primary.Small"
    IMAGES_PRIMARY_MEDIUM = "Images.Primary.Medium"
    IMAGES_PRIMARY_LARGE = "Images.Primary.Large"
    IMAGES_VARIANTS_SMALL = "Images.Variants.Small"
    IMAGES_VARIANTS_MEDIUM = "Images.Variants.Medium"
    IMAGES_VARIANTS_LARGE = "Images.Variants.Large"
    ITEM_INFO_BY_LINE_INFO = "ItemInfo.ByLineInfo"
    ITEM_INFO_CONTENT_INFO = "ItemInfo.ContentInfo"
    ITEM_INFO_CONTENT_RATING = "ItemInfo.ContentRating"
    ITEM_INFO_CLASSIFICATIONS = "ItemInfo.Classifications"
    ITEM_INFO_EXTERNAL_IDS = "ItemInfo.ExternalIds"
    ITEM_INFO_FEATURES = "ItemInfo.Features"
    ITEM_INFO_MANUFACTURE_INFO = "ItemInfo.ManufactureInfo"
    ITEM_INFO_PRODUCT_INFO = "ItemInfo.ProductInfo"
    ITEM_INFO_TECHNICAL_INFO = "ItemInfo.TechnicalInfo"
    ITEM_INFO_TITLE = "ItemInfo.Title"
    ITEM_INFO_TRADE_IN_INFO = "ItemInfo.TradeInInfo"
    OFFERS_LISTINGS_AVAILABILITY_MAX_ORDER_QUANTITY = "Offers.Listings.Availability.MaxOrderQuantity"
    OFFERS_LISTINGS_AVAILABILITY_MESSAGE = "Offers.Listings.Availability.Message"
    OFFERS_LISTINGS_AVAILABILITY_MIN_ORDER_QUANTITY = "Offers.Listings.Availability.MinOrderQuantity"
    OFFERS_LISTINGS_AVAILABILITY_TYPE = "Offers.Listings.Availability.Type"
    OFFERS_LISTINGS_CONDITION = "Offers.Listings.Condition"
    OFFERS_LISTINGS_CONDITION_SUB_CONDITION = "Offers.Listings.Condition.SubCondition"
    OFFERS_LISTINGS_DELIVERY_INFO_IS_AMAZON_FULFILLED = "Offers.Listings.DeliveryInfo.IsAmazonFulfilled"
    OFFERS_LISTINGS_DELIVERY_INFO_IS_FREE_SHIPPING_ELIGIBLE = (
        "Offers.Listings.DeliveryInfo.IsFreeShippingEligible"
    )
    OFFERS_LISTINGS_DELIVERY_INFO_IS_PRIME_ELIGIBLE = "Offers.Listings.DeliveryInfo.IsPrimeEligible"
    OFFERS_LISTINGS_DELIVERY_INFO_SHIPPING_CHARGES = "Offers.Listings.DeliveryInfo.ShippingCharges"
    OFFERS_LISTINGS_IS_BUY_BOX_WINNER = "Offers.Listings.IsBuyBoxWinner"
    OFFERS_LISTINGS_LOYALTY_POINTS_POINTS = "Offers.Listings.LoyaltyPoints.Points"
    OFFERS_LISTINGS_MERCHANT_INFO = "Offers.Listings.MerchantInfo"
    OFFERS_LISTINGS_PRICE = "Offers.Listings.Price"
    OFFERS_LISTINGS_PROGRAM_ELIGIBILITY_IS_PRIME_EXCLUSIVE = (
        "Offers.Listings.ProgramEligibility.IsPrimeExclusive"
    )
    OFFERS_LISTINGS_PROGRAM_ELIGIBILITY_IS_PRIME_PANTRY = "Offers.Listings.ProgramEligibility.IsPrimePantry"
    OFFERS_LISTINGS_PROMOTIONS = "Offers.Listings.Promotions"
    OFFERS_LISTINGS_SAVING_BASIS = "Offers.Listings.SavingBasis"
    OFFERS_SUMMARIES_HIGHEST_PRICE = "Offers.Summaries.HighestPrice"
    OFFERS_SUMMARIES_LOWEST_PRICE = "Offers.Summaries.LowestPrice"
    OFFERS_SUMMARIES_OFFER_COUNT = "Offers.Summaries.OfferCount"
    OFFERS_V2_LISTINGS_AVAILABILITY = "OffersV2.Listings.Availability"
    OFFERS_V2_LISTINGS_CONDITION = "OffersV2.Listings.Condition"
    OFFERS_V2_LISTINGS_DEAL_DETAILS = "OffersV2.Listings.DealDetails"
    OFFERS_V2_LISTINGS_IS_BUY_BOX_WINNER = "OffersV2.Listings.IsBuyBoxWinner"
    OFFERS_V2_LISTINGS_LOYALTY_POINTS = "OffersV2.Listings.LoyaltyPoints"
    OFFERS_V2_LISTINGS_MERCHANT_INFO = "OffersV2.Listings.MerchantInfo"
    OFFERS_V2_LISTINGS_PRICE = "OffersV2.Listings.Price"
    OFFERS_V2_LISTINGS_TYPE = "OffersV2.Listings.Type"
    PARENT_ASIN = "ParentASIN"
    RENTAL_OFFERS_LISTINGS_AVAILABILITY_MAX_ORDER_QUANTITY = (
        "RentalOffers.Listings.Availability.MaxOrderQuantity"
    )
    RENTAL_OFFERS_LISTINGS_AVAILABILITY_MESSAGE = "RentalOffers.Listings.Availability.Message"
    RENTAL_OFFERS_LISTINGS_AVAILABILITY_MIN_ORDER_QUANTITY = (
        "RentalOffers.Listings.Availability.MinOrderQuantity"
    )
    RENTAL_OFFERS_LISTINGS_AVAILABILITY_TYPE = "RentalOffers.Listings.Availability.Type"
    RENTAL_OFFERS_LISTINGS_BASE_PRICE = "RentalOffers.Listings.BasePrice"
    RENTAL_OFFERS_LISTINGS_CONDITION = "RentalOffers.Listings.Condition"
    RENTAL_OFFERS_LISTINGS_CONDITION_SUB_CONDITION = "RentalOffers.Listings.Condition.SubCondition"
    RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_IS_AMAZON_FULFILLED = (
        "RentalOffers.Listings.DeliveryInfo.IsAmazonFulfilled"
    )
    RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_IS_FREE_SHIPPING_ELIGIBLE = (
        "RentalOffers.Listings.DeliveryInfo.IsFreeShippingEligible"
    )
    RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_IS_PRIME_ELIGIBLE = (
        "RentalOffers.Listings.DeliveryInfo.IsPrimeEligible"
    )
    RENTAL_OFFERS_LISTINGS_DELIVERY_INFO_SHIPPING_CHARGES = (
        "RentalOffers.Listings.DeliveryInfo.ShippingCharges"
    )
    RENTAL_OFFERS_LISTINGS_MERCHANT_INFO = "RentalOffers.Listings.MerchantInfo"
    VARIATION_SUMMARY_PRICE_HIGHEST_PRICE = "VariationSummary.Price.HighestPrice"
    VARIATION_SUMMARY_PRICE_LOWEST_PRICE = "VariationSummary.Price.LowestPrice"
    VARIATION_SUMMARY_VARIATION_DIMENSION = "VariationSummary.VariationDimension"
    SEARCH_REFINEMENTS = "SearchRefinements"