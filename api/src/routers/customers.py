"""
Customer router ("Node Shopper").

Provides REST API endpoints for:
- Creating customers
- Adding invoices to a customer by user name
- Listing a customer's invoices by user name
"""

import structlog
from typing import List
from fastapi import APIRouter, Depends, status

from api.src.dependencies import get_customer_repository
from api.src.errors import NotFoundError
from api.src.models.common import MessageResponse
from api.src.models.customer import CustomerRequest, Invoice
from api.src.repositories.customer_repo import CustomerRepository

logger = structlog.get_logger(__name__)

INVALID_USER_NAME = "Invalid username."

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
    responses={
        500: {"model": MessageResponse, "description": "Server Exception"},
        501: {"model": MessageResponse, "description": "MongoDB Exception"}
    }
)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="createCustomer",
    description="Creates a customer with no invoices."
)
async def create_customer(
    customer_request: CustomerRequest,
    customer_repo: CustomerRepository = Depends(get_customer_repository)
) -> MessageResponse:
    await customer_repo.create_customer(customer_request)
    return MessageResponse(message="Customer added to MongoDB.")


@router.post(
    "/{username}/invoices",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="createInvoiceByUserName",
    description="Appends an invoice to the customer with this user name.",
    responses={401: {"model": MessageResponse, "description": "Invalid username"}}
)
async def create_invoice_by_user_name(
    username: str,
    invoice: Invoice,
    customer_repo: CustomerRepository = Depends(get_customer_repository)
) -> MessageResponse:
    """
    Add an invoice to a customer.

    Raises:
        NotFoundError: If no customer has this user name
    """
    customer = await customer_repo.add_invoice(username, invoice)
    if customer is None:
        logger.warning("invoice_create_invalid_user_name", user_name=username)
        raise NotFoundError(INVALID_USER_NAME)
    return MessageResponse(message="Invoice added to MongoDB.")


@router.get(
    "/{username}/invoices",
    response_model=List[Invoice],
    status_code=status.HTTP_200_OK,
    summary="findAllInvoicesByUserName",
    description="Returns the customer's invoices in the order they were added.",
    responses={401: {"model": MessageResponse, "description": "Invalid username"}}
)
async def find_all_invoices_by_user_name(
    username: str,
    customer_repo: CustomerRepository = Depends(get_customer_repository)
) -> List[Invoice]:
    invoices = await customer_repo.list_invoices(username)
    if invoices is None:
        logger.warning("invoice_list_invalid_user_name", user_name=username)
        raise NotFoundError(INVALID_USER_NAME)
    return invoices
