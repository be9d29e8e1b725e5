"""Customer service with status/type/search filtering."""

from __future__ import annotations

from typing import Any

from tenderdesk.models import ActivityType, Customer
from tenderdesk.services.activity_service import ActivityService
from tenderdesk.services.base_service import BaseService
from tenderdesk.services.filters import FilterSet


class CustomerService(BaseService):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.activities = ActivityService(db=self.db, settings=self.settings)

    def get_customer(self, customer_id: int) -> Customer | None:
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def list_customers(
        self,
        status: str | None = None,
        customer_type: str | None = None,
        search: str | None = None,
    ) -> list[Customer]:
        filters = (
            FilterSet()
            .equals(Customer.status, status)
            .equals(Customer.type, customer_type)
            .contains((Customer.name, Customer.email, Customer.company), search)
        )
        return (
            self.db.query(Customer)
            .filter(filters.clause())
            .order_by(Customer.created_at.desc(), Customer.id.desc())
            .all()
        )

    def create_customer(self, data: dict[str, Any], actor_id: int | None = None) -> Customer:
        customer = Customer(**data)
        self.db.add(customer)
        self.activities.record(ActivityType.CREATE_CUSTOMER, f"New customer added: {customer.name}", actor_id)
        self.commit()
        self.db.refresh(customer)
        return customer

    def update_customer(self, customer_id: int, changes: dict[str, Any], actor_id: int | None = None) -> Customer | None:
        customer = self.get_customer(customer_id)
        if customer is None:
            return None
        self.apply_changes(customer, changes)
        self.activities.record(ActivityType.UPDATE_CUSTOMER, f"Customer updated: {customer.name}", actor_id)
        self.commit()
        self.db.refresh(customer)
        return customer

    def delete_customer(self, customer_id: int, actor_id: int | None = None) -> bool:
        customer = self.get_customer(customer_id)
        if customer is None:
            return False
        name = customer.name
        self.db.delete(customer)
        self.activities.record(ActivityType.DELETE_CUSTOMER, f"Customer deleted: {name}", actor_id)
        self.commit()
        return True
