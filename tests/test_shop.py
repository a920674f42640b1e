import pytest

from lawndefense.mapfile import PlantSlot
from lawndefense.plants import PlantKind
from lawndefense.shop import default_shop, digits
from lawndefense.ui import Event, EventKind, MouseButton, Vec

LEFT = Event(EventKind.MOUSE_PRESSED, MouseButton.LEFT)
RIGHT = Event(EventKind.MOUSE_PRESSED, MouseButton.RIGHT)


def over(item):
    return Vec(item.widget.pos.x + 10, item.widget.pos.y + 10)


@pytest.fixture
def shop():
    return default_shop()


def test_default_shop(shop):
    assert [i.price for i in shop.items] == [25, 50, 100, 125]
    assert [i.kind for i in shop.items] == [
        PlantKind.WALNUT,
        PlantKind.SUN,
        PlantKind.PEA,
        PlantKind.BEET,
    ]
    assert shop.points == 100
    assert shop.selected is None


def test_refresh_greys_unaffordable(shop):
    shop.refresh()
    for item in shop.items:
        expected = 0 if item.price <= shop.points else 96
        assert item.widget.rect.left == expected


def test_buy_card(shop):
    walnut = shop.items[0]
    shop.handle(LEFT, over(walnut))
    assert shop.points == 75
    assert shop.selected is walnut
    assert walnut.held


def test_cannot_buy_too_expensive(shop):
    beet = shop.items[3]
    shop.handle(LEFT, over(beet))
    assert shop.points == 100
    assert shop.selected is None


def test_second_buy_blocked_while_holding(shop):
    shop.handle(LEFT, over(shop.items[0]))
    shop.handle(LEFT, over(shop.items[1]))
    assert shop.selected is shop.items[0]
    assert shop.points == 75


def test_right_click_refunds(shop):
    shop.handle(LEFT, over(shop.items[1]))
    shop.handle(RIGHT, Vec(700, 300))
    assert shop.points == 100
    assert shop.selected is None
    assert not shop.items[1].held


def test_place_plant(shop):
    slot = PlantSlot(Vec(300, 300))
    plants = []
    shop.handle(LEFT, over(shop.items[0]))
    plant = shop.place([slot], LEFT, Vec(310, 310), plants, lambda: 0.0)
    assert plants == [plant]
    assert plant.kind is PlantKind.WALNUT
    assert slot.occupied
    assert shop.selected is None
    assert not shop.items[0].held


def test_place_on_occupied_slot_does_nothing(shop):
    slot = PlantSlot(Vec(300, 300), occupied=True)
    plants = []
    shop.handle(LEFT, over(shop.items[0]))
    assert shop.place([slot], LEFT, Vec(310, 310), plants, lambda: 0.0) is None
    assert plants == []
    assert shop.selected is shop.items[0]


def test_place_without_selection(shop):
    slot = PlantSlot(Vec(300, 300))
    plants = []
    assert shop.place([slot], LEFT, Vec(310, 310), plants) is None
    assert not slot.occupied


def test_reset_restores_points(shop):
    shop.handle(LEFT, over(shop.items[2]))
    assert shop.points == 0
    shop.reset()
    assert shop.points == 100


@pytest.mark.parametrize("n", [0, 7, 123, 4096])
def test_digits_round_trip(n):
    assert int(digits(n)) == n


def test_digits_negative():
    assert digits(-5) == ""