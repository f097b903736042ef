"""Coupon administration: commands and handler."""

import structlog
from protean import handle
from protean.fields import DateTime, Float, Identifier, String
from protean.utils.globals import current_domain

from ordering.coupon.coupon import Coupon
from ordering.domain import ordering

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Coupon")
class CreateCoupon:
    name = String(required=True, max_length=100)
    discount = Float(required=True, min_value=0.0, max_value=100.0)
    expire = DateTime(required=True)


@ordering.command(part_of="Coupon")
class UpdateCoupon:
    coupon_id = Identifier(required=True)
    name = String(max_length=100)
    discount = Float(min_value=0.0, max_value=100.0)
    expire = DateTime()


@ordering.command(part_of="Coupon")
class DeleteCoupon:
    coupon_id = Identifier(required=True)


@ordering.command_handler(part_of=Coupon)
class ManageCouponHandler:
    @handle(CreateCoupon)
    def create_coupon(self, command):
        coupon = Coupon.create(
            name=command.name,
            discount=command.discount,
            expire=command.expire,
        )
        current_domain.repository_for(Coupon).add(coupon)
        logger.info("Coupon created", coupon_id=str(coupon.id), name=coupon.name)
        return str(coupon.id)

    @handle(UpdateCoupon)
    def update_coupon(self, command):
        repo = current_domain.repository_for(Coupon)
        coupon = repo.get(command.coupon_id)
        coupon.update(
            name=command.name,
            discount=command.discount,
            expire=command.expire,
        )
        repo.add(coupon)

    @handle(DeleteCoupon)
    def delete_coupon(self, command):
        repo = current_domain.repository_for(Coupon)
        coupon = repo.get(command.coupon_id)
        repo._dao.delete(coupon)
        logger.info("Coupon deleted", coupon_id=str(command.coupon_id))
