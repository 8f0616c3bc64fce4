"""Functionality behind the routes."""

import logging
from typing import Iterable

from orders.models import Order, ValidationError
from orders.repository import OrderRepository


logger = logging.getLogger(__name__)


NAME_REQUIRED = "name is required"


async def get_current_order(*, repository: OrderRepository) -> Order:
    """The stored order, or a blank one when nothing has been ordered yet."""
    order = await repository.first()
    return Order() if order is None else order


async def set_name(name: str, *, repository: OrderRepository) -> Order:
    if not name or not name.strip():
        logger.info("Rejected blank name")
        raise ValidationError(NAME_REQUIRED)
    return await repository.upsert(name=name)


async def set_cake_type(cake_type: str, *, repository: OrderRepository) -> Order:
    return await repository.upsert(cake_type=cake_type)


async def set_fillings(
    fillings: Iterable[str],
    *,
    repository: OrderRepository,
) -> Order:
    return await repository.upsert(fillings=list(fillings))
