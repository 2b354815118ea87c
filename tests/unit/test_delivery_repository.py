"""
Tests for the delivery repository.
"""

from gestioncommande.models import Delivery
from gestioncommande.repositories import DeliveryRepository


def test_delivery_repository_is_bound_to_delivery(database):
    assert DeliveryRepository(database).model is Delivery


def test_deleted_delivery_no_longer_exists(delivery_repository, make_delivery):
    delivery_repository.save(make_delivery(id=3))
    delivery_repository.save(make_delivery(id=7))

    delivery_repository.delete_by_id(7)

    assert delivery_repository.exists_by_id(7) is False
    assert delivery_repository.count() == 1
    assert [delivery.id for delivery in delivery_repository.find_all()] == [3]


def test_update_delivery_status(delivery_repository, make_delivery):
    saved = delivery_repository.save(make_delivery())

    saved.status = "DELIVERED"
    delivery_repository.save(saved)

    assert delivery_repository.find_by_id(saved.id).status == "DELIVERED"


def test_repositories_do_not_share_records(invoice_repository, delivery_repository,
                                           make_invoice, make_delivery):
    invoice_repository.save(make_invoice(id=1))
    delivery_repository.save(make_delivery(id=1))

    assert invoice_repository.count() == 1
    assert delivery_repository.count() == 1
    delivery_repository.delete_by_id(1)
    assert invoice_repository.exists_by_id(1) is True
