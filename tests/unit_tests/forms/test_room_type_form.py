import pytest

from hotel_admin.forms import FormState, RoomTypeForm
from hotel_admin.schemas import RoomType, RoomTypeCreate, RoomTypeUpdate

EXISTING = RoomType(id="rt-1", name_tr="Standart Oda", name_en="Standard Room", active=True)


class FakeRoomTypesClient:
    def __init__(self, returns=True):
        self.returns = returns
        self.calls = []

    def add(self, payload):
        self.calls.append(("add", None, payload))
        return RoomType(id="rt-9", **payload.model_dump()) if self.returns else None

    def update(self, record_id, payload):
        self.calls.append(("update", record_id, payload))
        if not self.returns:
            return None
        return EXISTING.model_copy(update=payload.model_dump(exclude_unset=True))


@pytest.fixture
def navigated():
    return []


def run_now(delay, callback):
    callback()


def test__create_room_type(settings, navigated):
    client = FakeRoomTypesClient()
    form = RoomTypeForm(
        client,
        lang="en",
        navigate=navigated.append,
        scheduler=run_now,
        redirect_delay=settings.redirect_delay_seconds,
    )
    form.name_tr = "Aile Odası"
    form.name_en = "Family Room"

    assert form.submit() is True

    action, record_id, payload = client.calls[0]
    assert action == "add"
    assert isinstance(payload, RoomTypeCreate)
    assert payload.to_payload() == {"nameTR": "Aile Odası", "nameEN": "Family Room", "active": True}
    assert form.success == "Room type added successfully"
    assert navigated == ["/en/admin/room-types"]
    assert form.state == FormState.REDIRECTING


def test__edit_room_type(navigated):
    client = FakeRoomTypesClient()
    form = RoomTypeForm(client, lang="tr", navigate=navigated.append, room_type=EXISTING, scheduler=run_now)
    assert form.name_en == "Standard Room"
    form.active = False

    assert form.submit() is True

    action, record_id, payload = client.calls[0]
    assert action == "update"
    assert record_id == "rt-1"
    assert isinstance(payload, RoomTypeUpdate)
    assert payload.to_payload() == {"nameTR": "Standart Oda", "nameEN": "Standard Room", "active": False}
    assert form.success == "Oda tipi başarıyla güncellendi"
    assert navigated == ["/tr/admin/room-types"]


def test__names_are_required(navigated):
    client = FakeRoomTypesClient()
    form = RoomTypeForm(client, lang="en", navigate=navigated.append, scheduler=run_now)
    form.name_tr = "Aile Odası"

    assert form.submit() is False

    assert client.calls == []
    assert form.error == "Room type name fields are required"
    assert form.state == FormState.IDLE


def test__save_failure(navigated):
    form = RoomTypeForm(
        FakeRoomTypesClient(returns=False), lang="tr", navigate=navigated.append, room_type=EXISTING, scheduler=run_now
    )

    assert form.submit() is False
    assert form.error == "Oda tipi kaydedilirken bir hata oluştu"
    assert navigated == []
