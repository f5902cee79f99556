"""Pydantic schemas for delivery fee responses"""

from decimal import Decimal

from pydantic import BaseModel, Field


class DeliveryFeeBreakdownResponse(BaseModel):
    """Response schema for an itemized delivery fee."""
    total_fee: Decimal = Field(..., ge=0, description="Fee charged to the customer after discounts")
    base_fee: Decimal = Field(..., ge=0, description="Weight-tiered fee before rush surcharge")
    rush_surcharge: Decimal = Field(Decimal("0"), ge=0, description="Flat surcharge for rush-eligible lines")
    free_shipping_discount: Decimal = Field(Decimal("0"), ge=0, description="Discount applied to standard lines")
    standard_line_count: int = Field(0, ge=0)
    rush_line_count: int = Field(0, ge=0)

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "total_fee": "34500",
                "base_fee": "24500",
                "rush_surcharge": "10000",
                "free_shipping_discount": "0",
                "standard_line_count": 0,
                "rush_line_count": 1
            }
        }
