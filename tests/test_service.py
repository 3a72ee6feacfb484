import pytest

from receipt_points.errors import NotFoundError, ValidationError


def test_process_assigns_id_and_stores(service, store, target_receipt):
	receipt_id = service.process(target_receipt)
	assert receipt_id
	assert store.get(receipt_id).id == receipt_id
	assert service.points(receipt_id) == 28


def test_process_overwrites_caller_id(service, store, make_receipt):
	receipt_id = service.process(make_receipt(id="chosen-by-caller"))
	assert receipt_id != "chosen-by-caller"
	assert store.get("chosen-by-caller") is None


def test_process_ids_are_unique(service, target_receipt):
	ids = {service.process(target_receipt) for _ in range(5)}
	assert len(ids) == 5


def test_invalid_receipt_not_stored(service, store, make_receipt):
	with pytest.raises(ValidationError) as exc:
		service.process(make_receipt(purchaseDate="2022-1-1", total="35.3"))
	assert set(exc.value.errors) == {"purchaseDate", "total", "error"}
	assert len(store) == 0


def test_unknown_id_not_found(service, store, target_receipt):
	service.process(target_receipt)
	with pytest.raises(NotFoundError) as exc:
		service.points("not-a-real-id")
	assert exc.value.receipt_id == "not-a-real-id"
	assert len(store) == 1

	# deterministic: asking again fails the same way
	with pytest.raises(NotFoundError):
		service.points("not-a-real-id")


def test_receipts_lists_in_insertion_order(service, make_receipt):
	first = service.process(make_receipt(retailer="first"))
	second = service.process(make_receipt(retailer="second"))
	assert [r.id for r in service.receipts()] == [first, second]
