"""
Customer repository for the ``customers`` collection.

Customers are addressed by ``userName``. The name is not unique at the
store level; every lookup acts on the first matching document.
"""

import structlog
from typing import List, Optional

from pymongo import ReturnDocument

from api.src.models.customer import Customer, CustomerRequest, Invoice
from api.src.repositories.document_store import MongoRepository

logger = structlog.get_logger(__name__)


class CustomerRepository(MongoRepository):
    """Repository for customer documents and their embedded invoices."""

    collection_name = "customers"

    async def create_customer(self, request: CustomerRequest) -> Customer:
        """
        Insert a new customer with an empty invoice list.

        Args:
            request: Validated customer fields

        Returns:
            Created customer
        """
        document = request.to_document()
        document["invoices"] = []

        async with self.operation("insert_one"):
            result = await self.collection.insert_one(document)

        document["_id"] = result.inserted_id
        logger.info(
            "customer_created",
            customer_id=str(result.inserted_id),
            user_name=request.user_name
        )
        return Customer.model_validate(document)

    async def get_customer_by_user_name(self, user_name: str) -> Optional[Customer]:
        """
        Get the first customer with the given user name.

        Args:
            user_name: Customer user name

        Returns:
            Customer or None if not found
        """
        async with self.operation("find_one"):
            document = await self.collection.find_one({"userName": user_name})

        if document is None:
            logger.debug("customer_not_found", user_name=user_name)
            return None
        return Customer.model_validate(document)

    async def add_invoice(self, user_name: str, invoice: Invoice) -> Optional[Customer]:
        """
        Append an invoice to a customer's invoice list.

        The append is a single ``$push``, so concurrent appends to the same
        customer are all kept. A missing or null list is reset to an empty
        list first, so the first invoice lands in a one-element list.

        Args:
            user_name: Customer user name
            invoice: Validated invoice

        Returns:
            Updated customer or None if no customer matches
        """
        async with self.operation("update_one"):
            await self.collection.update_one(
                {"userName": user_name, "invoices": None},
                {"$set": {"invoices": []}}
            )

        async with self.operation("find_one_and_update"):
            document = await self.collection.find_one_and_update(
                {"userName": user_name},
                {"$push": {"invoices": invoice.to_document()}},
                return_document=ReturnDocument.AFTER
            )

        if document is None:
            logger.debug("customer_not_found", user_name=user_name)
            return None

        logger.info(
            "invoice_added",
            user_name=user_name,
            invoices=len(document.get("invoices") or [])
        )
        return Customer.model_validate(document)

    async def list_invoices(self, user_name: str) -> Optional[List[Invoice]]:
        """
        Get a customer's invoices in insertion order.

        Returns:
            Invoices, or None if no customer matches
        """
        customer = await self.get_customer_by_user_name(user_name)
        if customer is None:
            return None
        return customer.invoices
