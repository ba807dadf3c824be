import dataclasses

import pytest

from exerciser.lessons.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Order,
    Package,
    Rectangle,
    ReportCard,
    UnitLikeStruct,
    Wrapper,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert (green.red, green.green, green.blue) == (0, 255, 0)


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLikeStruct()!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"
    assert UnitLikeStruct() == UnitLikeStruct()


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_order_template_values():
    assert create_order_template() == Order("Bob", 2019, False, False, True, 123, 0)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", -2210)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international()


def test_create_local_package():
    assert not Package("Canada", "Canada", 1200).is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500
    assert package.get_fees(6) == 9000


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_store_int_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"