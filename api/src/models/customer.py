"""
Customer ("Node Shopper") schemas.

A customer owns its invoices, and each invoice owns its line items. Neither
has an identity of its own.
"""

from typing import List

from pydantic import Field

from api.src.models.common import CamelModel, DocumentModel, RequiredStr, StoredList


class LineItem(CamelModel):
    name: RequiredStr
    price: float
    quantity: float = Field(..., ge=0)


class Invoice(CamelModel):
    """Invoice embedded in a customer document."""

    subtotal: float
    tax: float
    date_created: RequiredStr
    date_shipped: RequiredStr
    line_items: List[LineItem]

    model_config = {
        "json_schema_extra": {
            "example": {
                "subtotal": 42.5,
                "tax": 3.4,
                "dateCreated": "2023-07-06",
                "dateShipped": "2023-07-08",
                "lineItems": [{"name": "Sheet music", "price": 21.25, "quantity": 2}],
            }
        }
    }


class CustomerRequest(CamelModel):
    """Body for creating a customer. Invoices are added separately."""

    first_name: RequiredStr
    last_name: RequiredStr
    user_name: RequiredStr

    model_config = {
        "json_schema_extra": {
            "example": {"firstName": "Ada", "lastName": "Lovelace", "userName": "alovelace"}
        }
    }


class Customer(DocumentModel):
    """Stored customer."""

    first_name: str
    last_name: str
    user_name: str
    invoices: StoredList[Invoice] = []
